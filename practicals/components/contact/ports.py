from __future__ import annotations

from typing import Protocol

from practicals.core.ports.email import EmailPort

ContactMailerPort = EmailPort


class ContactRulesPort(Protocol):
    def get_min_name_length(self) -> int: ...

    def get_min_message_length(self) -> int: ...
