"""Time port. Storage uses UTC; display helpers work on local time."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class TimePort(Protocol):
    """Clock abstraction so components can be tested with fixed time."""

    def now_utc(self) -> datetime:
        """Get current UTC time (timezone-aware)."""
        ...

    def now_local(self) -> datetime:
        """Get current local wall-clock time."""
        ...
