"""Welcome clock: greeting plus the current local date and time."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from practicals.core.ports.time import TimePort

GREETING = "Welcome to CHARUSAT"


@dataclass(frozen=True)
class ClockReading:
    greeting: str
    date: str
    time: str


def format_short_date(dt: datetime) -> str:
    """M/D/YYYY without zero padding."""
    return f"{dt.month}/{dt.day}/{dt.year}"


def format_clock_time(dt: datetime) -> str:
    """h:MM:SS AM/PM with a 12-hour clock."""
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt:%M:%S} {'AM' if dt.hour < 12 else 'PM'}"


def read_clock(time: TimePort) -> ClockReading:
    now = time.now_local()
    return ClockReading(greeting=GREETING, date=format_short_date(now), time=format_clock_time(now))
