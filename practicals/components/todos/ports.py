from __future__ import annotations

from typing import Protocol

from .models import TodoItem


class TodoStorePort(Protocol):
    def list_all(self) -> list[TodoItem]:
        """Items in insertion order."""
        ...

    def add(self, text: str) -> TodoItem: ...

    def get(self, item_id: int) -> TodoItem | None: ...

    def update(self, item_id: int, text: str) -> TodoItem | None: ...

    def delete(self, item_id: int) -> bool: ...
