"""
Authentication portal models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from practicals.domain.entities import Account


@dataclass(frozen=True)
class AccountValidationError:
    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class RegisterInput:
    data: dict[str, Any]


@dataclass(frozen=True)
class LoginInput:
    email: str | None
    password: str | None


@dataclass(frozen=True)
class UpdateProfileInput:
    account: Account
    data: dict[str, Any]


# --- Output Models ---


@dataclass
class AccountOutput:
    """
    Result of an account operation.

    `error_code` is one of validation, duplicate, invalid_credentials,
    deactivated, not_found.
    """

    success: bool
    account: Account | None = None
    token: str | None = None
    message: str = ""
    error_code: str | None = None
    errors: list[AccountValidationError] = field(default_factory=list)
