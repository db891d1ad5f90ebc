from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TodoItem:
    id: int
    text: str


@dataclass(frozen=True)
class TodoOutput:
    success: bool
    item: TodoItem | None = None
    error: str | None = None
    not_found: bool = False
