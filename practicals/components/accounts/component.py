"""
Accounts component - registration, login, and profile for the
authentication portal.

Shell Layer - validation from _impl, persistence through ports.
"""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from practicals.core.ports.time import TimePort
from practicals.domain.entities import Account

from ._impl import (
    parse_birth_date,
    validate_birth_date,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
)
from .models import (
    AccountOutput,
    AccountValidationError,
    LoginInput,
    RegisterInput,
    UpdateProfileInput,
)
from .ports import AccountRepoPort, AccountRulesPort, AuthAdapterPort

MSG_REGISTERED = "User registered successfully"
MSG_LOGGED_IN = "Login successful"
MSG_PROFILE_UPDATED = "Profile updated successfully"
MSG_DUPLICATE = "User already exists with this email"
MSG_INVALID_CREDENTIALS = "Invalid credentials"
MSG_DEACTIVATED = "Account is deactivated"
MSG_VALIDATION = "Validation failed"


def _get(data: dict[str, Any], camel: str, snake: str) -> Any:
    return data.get(camel, data.get(snake))


def _profile_errors(
    data: dict[str, Any], rules: AccountRulesPort, time: TimePort, partial: bool
) -> list[AccountValidationError]:
    errors: list[AccountValidationError] = []
    min_len, max_len = rules.get_name_length()
    for camel, snake in (("firstName", "first_name"), ("lastName", "last_name")):
        if partial and camel not in data and snake not in data:
            continue
        err = validate_name(_get(data, camel, snake), snake, min_len, max_len)
        if err:
            errors.append(err)

    phone_err = validate_phone(data.get("phone"))
    if phone_err:
        errors.append(phone_err)

    dob_err = validate_birth_date(
        _get(data, "dateOfBirth", "date_of_birth"),
        time.now_local().date(),
        rules.get_minimum_age_years(),
    )
    if dob_err:
        errors.append(dob_err)
    return errors


def run_register(
    inp: RegisterInput,
    repo: AccountRepoPort,
    auth: AuthAdapterPort,
    rules: AccountRulesPort,
    time: TimePort,
) -> AccountOutput:
    data = inp.data
    errors = _profile_errors(data, rules, time, partial=False)
    email_err = validate_email(data.get("email"))
    if email_err:
        errors.append(email_err)
    errors.extend(
        validate_password(
            data.get("password"),
            _get(data, "confirmPassword", "confirm_password"),
            rules.get_password_min_length(),
        )
    )
    if errors:
        return AccountOutput(
            success=False, error_code="validation", message=MSG_VALIDATION, errors=errors
        )

    email = str(data["email"]).strip().lower()
    if repo.get_by_email(email):
        return AccountOutput(success=False, error_code="duplicate", message=MSG_DUPLICATE)

    now = time.now_utc()
    account = Account(
        id=uuid4(),
        first_name=str(_get(data, "firstName", "first_name")).strip(),
        last_name=str(_get(data, "lastName", "last_name")).strip(),
        email=email,
        password_hash=auth.hash_password(data["password"]),
        phone=data.get("phone") or None,
        date_of_birth=parse_birth_date(_get(data, "dateOfBirth", "date_of_birth")),
        created_at=now,
        updated_at=now,
    )
    repo.save(account)
    token = auth.create_token(account.id, rules.get_token_ttl_minutes())
    return AccountOutput(success=True, account=account, token=token, message=MSG_REGISTERED)


def run_login(
    inp: LoginInput,
    repo: AccountRepoPort,
    auth: AuthAdapterPort,
    rules: AccountRulesPort,
    time: TimePort,
) -> AccountOutput:
    errors: list[AccountValidationError] = []
    email_err = validate_email(inp.email)
    if email_err:
        errors.append(email_err)
    if not isinstance(inp.password, str) or not inp.password:
        errors.append(
            AccountValidationError("password_required", "Password is required", "password")
        )
    if errors:
        return AccountOutput(
            success=False, error_code="validation", message=MSG_VALIDATION, errors=errors
        )

    account = repo.get_by_email((inp.email or "").strip().lower())
    if account is None or not auth.verify_password(inp.password, account.password_hash):
        return AccountOutput(
            success=False, error_code="invalid_credentials", message=MSG_INVALID_CREDENTIALS
        )
    if not account.is_active:
        return AccountOutput(success=False, error_code="deactivated", message=MSG_DEACTIVATED)

    now = time.now_utc()
    account = repo.save(account.model_copy(update={"last_login": now, "updated_at": now}))
    token = auth.create_token(account.id, rules.get_token_ttl_minutes())
    return AccountOutput(success=True, account=account, token=token, message=MSG_LOGGED_IN)


def run_update_profile(
    inp: UpdateProfileInput,
    repo: AccountRepoPort,
    rules: AccountRulesPort,
    time: TimePort,
) -> AccountOutput:
    """Only names, phone, and date of birth can change."""
    data = inp.data
    errors = _profile_errors(data, rules, time, partial=True)
    if errors:
        return AccountOutput(
            success=False, error_code="validation", message=MSG_VALIDATION, errors=errors
        )

    updates: dict[str, Any] = {"updated_at": time.now_utc()}
    first = _get(data, "firstName", "first_name")
    if first is not None:
        updates["first_name"] = str(first).strip()
    last = _get(data, "lastName", "last_name")
    if last is not None:
        updates["last_name"] = str(last).strip()
    if "phone" in data:
        updates["phone"] = data["phone"] or None
    if "dateOfBirth" in data or "date_of_birth" in data:
        updates["date_of_birth"] = parse_birth_date(_get(data, "dateOfBirth", "date_of_birth"))

    account = repo.save(inp.account.model_copy(update=updates))
    return AccountOutput(success=True, account=account, message=MSG_PROFILE_UPDATED)
