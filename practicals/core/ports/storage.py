"""
File Storage Interface.

Protocol for a flat directory of named files, used by the log viewer
(read-only) and the résumé portal (read/write).

Invariants:
- Names never resolve outside the store directory (traversal raises ValueError)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Protocol


@dataclass(frozen=True)
class StoredFile:
    """Metadata for a stored file."""

    name: str
    size: int
    modified: datetime
    created: datetime


class FileStorePort(Protocol):
    def list_files(self) -> list[StoredFile]:
        """Regular files directly under the store."""
        ...

    def stat(self, path: str) -> StoredFile:
        """Raises FileNotFoundError when missing, ValueError on traversal."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        ...

    def path_for(self, name: str) -> Path:
        """Absolute path of a stored file. Raises ValueError on traversal."""
        ...

    def exists(self, path: str) -> bool:
        ...

    def save(self, name: str, data: bytes) -> str:
        ...

    def delete(self, path: str) -> bool:
        ...
