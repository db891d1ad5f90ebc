"""
Library portal session component.

A visitor signs in with a name and email; the session records when they
signed in so the portal can show how long they have been browsing.
"""

from __future__ import annotations

import random
import re
import string
from dataclasses import replace
from datetime import datetime

from practicals.core.ports.time import TimePort

from .models import LibrarySession, LoginInput, SessionOutput, SessionView
from .ports import LibrarySessionStorePort

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_BASE36 = string.digits + string.ascii_lowercase


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))


def generate_session_id(now: datetime, rng: random.Random | None = None) -> str:
    """`sess_<epoch-ms>_<9 base36 chars>`."""
    chooser = rng or random
    suffix = "".join(chooser.choice(_BASE36) for _ in range(9))
    return f"sess_{int(now.timestamp() * 1000)}_{suffix}"


def calculate_duration(start: datetime, end: datetime) -> str:
    total_seconds = max(0, int((end - start).total_seconds()))
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    if minutes > 0:
        return f"{minutes}m {seconds}s"
    return f"{seconds}s"


def format_datetime(dt: datetime) -> str:
    """e.g. "Mar 5, 2025, 09:07:03 PM"."""
    return f"{dt:%b} {dt.day}, {dt.year}, {dt:%I:%M:%S %p}"


def run_login(
    inp: LoginInput,
    store: LibrarySessionStorePort,
    time: TimePort,
    rng: random.Random | None = None,
) -> SessionOutput:
    username = (inp.username or "").strip()
    email = (inp.email or "").strip()

    if not username or not email:
        return SessionOutput(success=False, error="Please fill in all fields")
    if not is_valid_email(email):
        return SessionOutput(success=False, error="Please enter a valid email address")

    now = time.now_utc()
    session = LibrarySession(
        name=username,
        email=email,
        login_time=now,
        session_id=generate_session_id(now, rng),
    )
    store.save(session.session_id, session)
    return SessionOutput(success=True, session=session)


def run_view(
    session_id: str | None, store: LibrarySessionStorePort, time: TimePort
) -> SessionView | None:
    if not session_id:
        return None
    session = store.get(session_id)
    if session is None or not session.is_active:
        return None
    return SessionView(
        session=session,
        duration=calculate_duration(session.login_time, time.now_utc()),
        login_time_formatted=format_datetime(session.login_time.astimezone()),
    )


def run_refresh(
    session_id: str | None,
    store: LibrarySessionStorePort,
    time: TimePort,
    rng: random.Random | None = None,
) -> SessionOutput:
    """Restart the session clock under a fresh id."""
    session = store.get(session_id) if session_id else None
    if session is None:
        return SessionOutput(success=False, error="No active session")

    now = time.now_utc()
    refreshed = replace(session, login_time=now, session_id=generate_session_id(now, rng))
    store.delete(session.session_id)
    store.save(refreshed.session_id, refreshed)
    return SessionOutput(success=True, session=refreshed)


def run_logout(session_id: str | None, store: LibrarySessionStorePort) -> None:
    if session_id:
        store.delete(session_id)
