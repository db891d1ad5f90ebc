"""
Account validation rules.

Functional Core - pure checks over registration and profile payloads.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Any

from .models import AccountValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\d{10}$")

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"\d")

_FIELD_LABELS = {"first_name": "First name", "last_name": "Last name"}
_WIRE_NAMES = {"first_name": "firstName", "last_name": "lastName"}


def parse_birth_date(value: Any) -> date | None:
    """Accepts a date, an ISO date, or an ISO datetime. Raises ValueError."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        return datetime.fromisoformat(text).date()


def latest_allowed_birth_date(today: date, minimum_age_years: int = 18) -> date:
    """Years are counted as 365 days."""
    return today - timedelta(days=minimum_age_years * 365)


def validate_name(
    value: Any, field: str, min_len: int = 2, max_len: int = 50
) -> AccountValidationError | None:
    label = _FIELD_LABELS[field]
    wire = _WIRE_NAMES[field]
    text = value.strip() if isinstance(value, str) else ""
    if not text:
        return AccountValidationError(f"{field}_required", f"{label} is required", wire)
    if len(text) < min_len:
        return AccountValidationError(
            f"{field}_too_short", f"{label} must be at least {min_len} characters", wire
        )
    if len(text) > max_len:
        return AccountValidationError(
            f"{field}_too_long", f"{label} cannot exceed {max_len} characters", wire
        )
    return None


def validate_password(
    password: Any, confirm: Any = None, min_length: int = 6
) -> list[AccountValidationError]:
    errors: list[AccountValidationError] = []
    if not isinstance(password, str) or not password:
        return [AccountValidationError("password_required", "Password is required", "password")]
    if len(password) < min_length:
        errors.append(
            AccountValidationError(
                "password_too_short",
                f"Password must be at least {min_length} characters",
                "password",
            )
        )
    if not (_LOWER.search(password) and _UPPER.search(password) and _DIGIT.search(password)):
        errors.append(
            AccountValidationError(
                "password_weak",
                "Password must contain at least one lowercase letter, "
                "one uppercase letter, and one number",
                "password",
            )
        )
    if confirm is not None and confirm != password:
        errors.append(
            AccountValidationError("password_mismatch", "Passwords must match", "confirmPassword")
        )
    return errors


def validate_phone(phone: Any) -> AccountValidationError | None:
    if phone is None or phone == "":
        return None
    if not isinstance(phone, str) or not PHONE_PATTERN.match(phone):
        return AccountValidationError(
            "phone_invalid", "Please enter a valid 10-digit phone number", "phone"
        )
    return None


def validate_birth_date(
    value: Any, today: date, minimum_age_years: int = 18
) -> AccountValidationError | None:
    try:
        dob = parse_birth_date(value)
    except ValueError:
        return AccountValidationError(
            "date_of_birth_invalid", "Please enter a valid date", "dateOfBirth"
        )
    if dob is not None and dob > latest_allowed_birth_date(today, minimum_age_years):
        return AccountValidationError(
            "date_of_birth_too_young",
            f"You must be at least {minimum_age_years} years old",
            "dateOfBirth",
        )
    return None


def validate_email(email: Any) -> AccountValidationError | None:
    text = email.strip() if isinstance(email, str) else ""
    if not text:
        return AccountValidationError("email_required", "Email is required", "email")
    if not EMAIL_PATTERN.match(text):
        return AccountValidationError(
            "email_invalid", "Please enter a valid email address", "email"
        )
    return None
