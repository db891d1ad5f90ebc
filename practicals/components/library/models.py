"""
Library portal session models.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class LibrarySession:
    name: str
    email: str
    login_time: datetime
    session_id: str
    is_active: bool = True


@dataclass(frozen=True)
class LoginInput:
    username: str | None
    email: str | None


@dataclass(frozen=True)
class SessionOutput:
    success: bool
    session: LibrarySession | None = None
    error: str | None = None


@dataclass(frozen=True)
class SessionView:
    """A session as displayed, with its running duration."""

    session: LibrarySession
    duration: str
    login_time_formatted: str
