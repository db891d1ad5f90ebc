"""
StudentService - student records for the admin panel.

Functional Core - validation and paging rules.
"""

from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

from practicals.core.ports.time import TimePort
from practicals.domain.entities import Student
from practicals.domain.formatting import parse_int

from .models import StudentPage, StudentValidationError
from .ports import StudentRepoPort, StudentRulesPort

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^\+?[0-9\-\s]{7,20}$")

NAME_MIN = 2
NAME_MAX = 100

# camelCase wire names accepted alongside snake_case
_FIELD_ALIASES = {
    "feePaid": "fee_paid",
    "joinedAt": "joined_at",
}


# --- Normalization and Validation ---


def normalize_student_data(data: dict[str, Any]) -> dict[str, Any]:
    """Apply aliases and trimming; email is lowercased."""
    out: dict[str, Any] = {}
    for key, value in data.items():
        key = _FIELD_ALIASES.get(key, key)
        if key in ("name", "email", "phone", "course") and isinstance(value, str):
            value = value.strip()
            if key == "email":
                value = value.lower()
        out[key] = value
    if out.get("phone") == "":
        out["phone"] = None
    return out


def validate_student_data(
    data: dict[str, Any], name_min: int = NAME_MIN, name_max: int = NAME_MAX
) -> list[StudentValidationError]:
    """Validate a complete (normalized) student record."""
    errors: list[StudentValidationError] = []

    name = data.get("name")
    if not isinstance(name, str) or not name:
        errors.append(StudentValidationError("name_required", "Name is required", "name"))
    elif not name_min <= len(name) <= name_max:
        errors.append(
            StudentValidationError(
                "name_length",
                f"Name must be between {name_min} and {name_max} characters",
                "name",
            )
        )

    email = data.get("email")
    if not isinstance(email, str) or not email:
        errors.append(StudentValidationError("email_required", "Email is required", "email"))
    elif not EMAIL_PATTERN.match(email):
        errors.append(StudentValidationError("email_invalid", "Email is invalid", "email"))

    phone = data.get("phone")
    if phone is not None and (not isinstance(phone, str) or not PHONE_PATTERN.match(phone)):
        errors.append(StudentValidationError("phone_invalid", "Phone number is invalid", "phone"))

    course = data.get("course")
    if not isinstance(course, str) or not course:
        errors.append(StudentValidationError("course_required", "Course is required", "course"))

    fee_paid = data.get("fee_paid", False)
    if not isinstance(fee_paid, bool):
        errors.append(
            StudentValidationError("fee_paid_invalid", "feePaid must be a boolean", "feePaid")
        )

    joined_at = data.get("joined_at")
    if joined_at is not None and not isinstance(joined_at, datetime):
        try:
            datetime.fromisoformat(str(joined_at))
        except ValueError:
            errors.append(
                StudentValidationError("joined_at_invalid", "joinedAt must be a date", "joinedAt")
            )

    return errors


def _coerce_joined_at(value: Any, default: datetime) -> datetime:
    if value is None:
        return default
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def resolve_page(raw_page: str | int | None) -> int:
    value = parse_int(raw_page)
    return max(value or 1, 1)


def resolve_limit(raw_limit: str | int | None, default: int = 50, maximum: int = 100) -> int:
    value = parse_int(raw_limit)
    return min(max(value or default, 1), maximum)


def _parse_id(student_id: str) -> UUID | None:
    try:
        return UUID(str(student_id))
    except ValueError:
        return None


_NOT_FOUND = StudentValidationError("student_not_found", "Student not found")


# --- Student Service ---


class StudentService:
    """Student CRUD with search and paging."""

    def __init__(
        self,
        repo: StudentRepoPort,
        time: TimePort,
        rules: StudentRulesPort | None = None,
    ) -> None:
        self._repo = repo
        self._time = time
        self._rules = rules

    def _name_length(self) -> tuple[int, int]:
        return self._rules.get_name_length() if self._rules else (NAME_MIN, NAME_MAX)

    def get(self, student_id: str) -> Student | None:
        uid = _parse_id(student_id)
        return self._repo.get_by_id(uid) if uid else None

    def create(self, data: dict[str, Any]) -> tuple[Student | None, list[StudentValidationError]]:
        clean = normalize_student_data(data)
        errors = validate_student_data(clean, *self._name_length())
        if errors:
            return None, errors

        if self._repo.get_by_email(clean["email"]):
            return None, [
                StudentValidationError(
                    "email_duplicate", "A student with this email already exists", "email"
                )
            ]

        now = self._time.now_utc()
        student = Student(
            id=uuid4(),
            name=clean["name"],
            email=clean["email"],
            phone=clean.get("phone"),
            course=clean["course"],
            fee_paid=clean.get("fee_paid", False),
            joined_at=_coerce_joined_at(clean.get("joined_at"), now),
            created_at=now,
            updated_at=now,
        )
        return self._repo.save(student), []

    def update(
        self, student_id: str, data: dict[str, Any]
    ) -> tuple[Student | None, list[StudentValidationError]]:
        existing = self.get(student_id)
        if existing is None:
            return None, [_NOT_FOUND]

        merged = existing.model_dump(
            include={"name", "email", "phone", "course", "fee_paid", "joined_at"}
        )
        merged.update(normalize_student_data(data))
        errors = validate_student_data(merged, *self._name_length())
        if errors:
            return None, errors

        if merged["email"] != existing.email:
            other = self._repo.get_by_email(merged["email"])
            if other and other.id != existing.id:
                return None, [
                    StudentValidationError(
                        "email_duplicate", "A student with this email already exists", "email"
                    )
                ]

        updated = existing.model_copy(
            update={
                "name": merged["name"],
                "email": merged["email"],
                "phone": merged.get("phone"),
                "course": merged["course"],
                "fee_paid": merged.get("fee_paid", False),
                "joined_at": _coerce_joined_at(merged.get("joined_at"), existing.joined_at),
                "updated_at": self._time.now_utc(),
            }
        )
        return self._repo.save(updated), []

    def delete(self, student_id: str) -> bool:
        uid = _parse_id(student_id)
        return self._repo.delete(uid) if uid else False

    def list_page(
        self, q: str, raw_page: str | int | None, raw_limit: str | int | None
    ) -> StudentPage:
        default = self._rules.get_default_page_size() if self._rules else 50
        maximum = self._rules.get_max_page_size() if self._rules else 100
        page = resolve_page(raw_page)
        limit = resolve_limit(raw_limit, default, maximum)
        query = (q or "").strip()

        total = self._repo.count(query)
        items = self._repo.search(query, (page - 1) * limit, limit)
        return StudentPage(items=items, total=total, page=page, pages=math.ceil(total / limit))
