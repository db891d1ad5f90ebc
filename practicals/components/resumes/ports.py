"""
Resume portal ports.
"""

from __future__ import annotations

from typing import Protocol

from practicals.core.ports.storage import FileStorePort

ResumeStorePort = FileStorePort


class UploadRulesPort(Protocol):
    def get_max_bytes(self) -> int: ...

    def get_allowed_mime_types(self) -> list[str]: ...

    def get_allowed_extensions(self) -> list[str]: ...

    def get_filename_prefix(self) -> str: ...
