"""
Contact form models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ContactInput:
    name: str | None
    email: str | None
    message: str | None


@dataclass(frozen=True)
class ContactAddresses:
    """Where contact messages are sent from and to."""

    sender: str
    recipient: str
    sender_display_name: str = "Portfolio Contact"


@dataclass(frozen=True)
class ContactOutput:
    success: bool
    message: str = ""
    errors: dict[str, str] = field(default_factory=dict)
    preview_id: str | None = None
    delivery_failed: bool = False
