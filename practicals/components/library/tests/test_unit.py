"""
Library session component unit tests.
"""

from __future__ import annotations

import random
import re
from datetime import UTC, datetime

import pytest

from practicals.adapters.auth.session_store import InMemorySessionStore
from practicals.adapters.clock import FixedClock
from practicals.components.library import (
    LoginInput,
    calculate_duration,
    format_datetime,
    generate_session_id,
    run_login,
    run_logout,
    run_refresh,
    run_view,
)

START = datetime(2025, 3, 5, 9, 0, 0, tzinfo=UTC)


@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(START)


class TestPureFunctions:
    def test_session_id_shape(self) -> None:
        sid = generate_session_id(START, random.Random(7))
        assert re.fullmatch(r"sess_\d{13}_[0-9a-z]{9}", sid)
        assert sid.startswith(f"sess_{int(START.timestamp() * 1000)}_")

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(0, "0s"), (42, "42s"), (61, "1m 1s"), (3600, "1h 0m 0s"), (3725, "1h 2m 5s")],
    )
    def test_calculate_duration(self, seconds: int, expected: str) -> None:
        end = datetime.fromtimestamp(START.timestamp() + seconds, UTC)
        assert calculate_duration(START, end) == expected

    def test_format_datetime(self) -> None:
        assert format_datetime(datetime(2025, 3, 5, 21, 7, 3)) == "Mar 5, 2025, 09:07:03 PM"


class TestLogin:
    def test_requires_both_fields(self, store, clock) -> None:
        out = run_login(LoginInput("  ", "a@b.co"), store, clock)
        assert out.error == "Please fill in all fields"

    def test_rejects_bad_email(self, store, clock) -> None:
        out = run_login(LoginInput("Ana", "ana@nowhere"), store, clock)
        assert out.error == "Please enter a valid email address"

    def test_creates_session(self, store, clock) -> None:
        out = run_login(LoginInput(" Ana ", "ana@lib.org"), store, clock)
        assert out.success
        assert out.session is not None
        assert out.session.name == "Ana"
        assert out.session.is_active
        assert store.get(out.session.session_id) == out.session


class TestSessionLifecycle:
    def test_view_reports_duration(self, store, clock) -> None:
        session = run_login(LoginInput("Ana", "ana@lib.org"), store, clock).session
        assert session is not None
        clock.advance(minutes=2, seconds=5)

        view = run_view(session.session_id, store, clock)
        assert view is not None
        assert view.duration == "2m 5s"

    def test_view_without_session(self, store, clock) -> None:
        assert run_view(None, store, clock) is None
        assert run_view("sess_missing", store, clock) is None

    def test_refresh_issues_new_id(self, store, clock) -> None:
        session = run_login(LoginInput("Ana", "ana@lib.org"), store, clock).session
        assert session is not None
        clock.advance(hours=1)

        out = run_refresh(session.session_id, store, clock)
        assert out.success
        assert out.session is not None
        assert out.session.session_id != session.session_id
        assert out.session.login_time == clock.now_utc()
        assert store.get(session.session_id) is None

    def test_logout(self, store, clock) -> None:
        session = run_login(LoginInput("Ana", "ana@lib.org"), store, clock).session
        assert session is not None
        run_logout(session.session_id, store)
        assert run_view(session.session_id, store, clock) is None


class TestSessionStore:
    def test_drops_oldest_beyond_capacity(self, clock) -> None:
        store = InMemorySessionStore(max_sessions=2)
        ids = []
        for name in ("Ana", "Bo", "Cy"):
            session = run_login(LoginInput(name, f"{name.lower()}@lib.org"), store, clock).session
            assert session is not None
            ids.append(session.session_id)

        assert len(store) == 2
        assert store.get(ids[0]) is None
        assert store.get(ids[2]) is not None
