"""Welcome clock component."""

from practicals.components.clock.component import (
    GREETING,
    ClockReading,
    format_clock_time,
    format_short_date,
    read_clock,
)

__all__ = ["read_clock", "format_clock_time", "format_short_date", "ClockReading", "GREETING"]
