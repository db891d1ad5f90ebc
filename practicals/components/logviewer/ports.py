"""
Log viewer component ports.

Protocol interfaces for log viewer dependencies.
"""

from __future__ import annotations

from typing import Protocol

from practicals.core.ports.storage import FileStorePort

LogStorePort = FileStorePort


class LogViewerRulesPort(Protocol):
    def get_allowed_extensions(self) -> list[str]:
        ...

    def get_default_page_size(self) -> int:
        ...
