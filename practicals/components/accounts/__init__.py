"""
Accounts component.

Registration, login, and profile management for the authentication
portal. Passwords are hashed by the auth adapter; tokens are issued on
register and login.
"""

from practicals.components.accounts._impl import (
    EMAIL_PATTERN,
    PHONE_PATTERN,
    latest_allowed_birth_date,
    parse_birth_date,
    validate_birth_date,
    validate_email,
    validate_name,
    validate_password,
    validate_phone,
)
from practicals.components.accounts.component import (
    MSG_DEACTIVATED,
    MSG_DUPLICATE,
    MSG_INVALID_CREDENTIALS,
    MSG_LOGGED_IN,
    MSG_PROFILE_UPDATED,
    MSG_REGISTERED,
    MSG_VALIDATION,
    run_login,
    run_register,
    run_update_profile,
)
from practicals.components.accounts.models import (
    AccountOutput,
    AccountValidationError,
    LoginInput,
    RegisterInput,
    UpdateProfileInput,
)
from practicals.components.accounts.ports import (
    AccountRepoPort,
    AccountRulesPort,
    AuthAdapterPort,
)

__all__ = [
    # Component
    "run_register",
    "run_login",
    "run_update_profile",
    # Validation
    "validate_birth_date",
    "validate_email",
    "validate_name",
    "validate_password",
    "validate_phone",
    "parse_birth_date",
    "latest_allowed_birth_date",
    "EMAIL_PATTERN",
    "PHONE_PATTERN",
    # Messages
    "MSG_DEACTIVATED",
    "MSG_DUPLICATE",
    "MSG_INVALID_CREDENTIALS",
    "MSG_LOGGED_IN",
    "MSG_PROFILE_UPDATED",
    "MSG_REGISTERED",
    "MSG_VALIDATION",
    # Models
    "AccountOutput",
    "AccountValidationError",
    "LoginInput",
    "RegisterInput",
    "UpdateProfileInput",
    # Ports
    "AccountRepoPort",
    "AccountRulesPort",
    "AuthAdapterPort",
]
