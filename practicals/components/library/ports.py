from __future__ import annotations

from typing import Protocol

from .models import LibrarySession


class LibrarySessionStorePort(Protocol):
    def get(self, session_id: str) -> LibrarySession | None: ...

    def save(self, session_id: str, session: LibrarySession) -> None: ...

    def delete(self, session_id: str) -> None: ...
