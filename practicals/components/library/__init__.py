"""Library portal session component."""

from practicals.components.library.component import (
    EMAIL_PATTERN,
    calculate_duration,
    format_datetime,
    generate_session_id,
    is_valid_email,
    run_login,
    run_logout,
    run_refresh,
    run_view,
)
from practicals.components.library.models import (
    LibrarySession,
    LoginInput,
    SessionOutput,
    SessionView,
)
from practicals.components.library.ports import LibrarySessionStorePort

__all__ = [
    "run_login",
    "run_logout",
    "run_refresh",
    "run_view",
    "calculate_duration",
    "format_datetime",
    "generate_session_id",
    "is_valid_email",
    "EMAIL_PATTERN",
    "LibrarySession",
    "LoginInput",
    "SessionOutput",
    "SessionView",
    "LibrarySessionStorePort",
]
