"""Product site shell status."""

from __future__ import annotations

from dataclasses import dataclass

from practicals.core.ports.time import TimePort

SITE_VERSION = "1.0.0"


@dataclass(frozen=True)
class SiteStatus:
    status: str
    timestamp: str
    version: str


def get_status(time: TimePort) -> SiteStatus:
    now = time.now_utc()
    return SiteStatus(
        status="Server is running",
        timestamp=now.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        version=SITE_VERSION,
    )
