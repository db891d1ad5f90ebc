"""Cross-cutting ports shared by several practicals."""

from practicals.core.ports.email import (
    EmailAddress,
    EmailMessage,
    EmailPort,
    EmailResult,
    EmailStatus,
)
from practicals.core.ports.time import TimePort

__all__ = [
    "EmailAddress",
    "EmailMessage",
    "EmailPort",
    "EmailResult",
    "EmailStatus",
    "TimePort",
]
