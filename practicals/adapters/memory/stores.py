"""
In-memory stores for the practicals that keep no durable state.

All stores are guarded by a lock; FastAPI runs sync endpoints in a
thread pool.
"""

from __future__ import annotations

from threading import Lock

from practicals.components.navigation import NavState
from practicals.components.todos import TodoItem


class InMemoryTodoStore:
    def __init__(self) -> None:
        self._items: dict[int, TodoItem] = {}
        self._next_id = 1
        self._lock = Lock()

    def list_all(self) -> list[TodoItem]:
        with self._lock:
            return list(self._items.values())

    def add(self, text: str) -> TodoItem:
        with self._lock:
            item = TodoItem(id=self._next_id, text=text)
            self._items[item.id] = item
            self._next_id += 1
            return item

    def get(self, item_id: int) -> TodoItem | None:
        with self._lock:
            return self._items.get(item_id)

    def update(self, item_id: int, text: str) -> TodoItem | None:
        with self._lock:
            if item_id not in self._items:
                return None
            item = TodoItem(id=item_id, text=text)
            self._items[item_id] = item
            return item

    def delete(self, item_id: int) -> bool:
        with self._lock:
            return self._items.pop(item_id, None) is not None


class InMemoryRepStore:
    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._lock = Lock()

    def get(self, exercise: str) -> int:
        with self._lock:
            return self._counts.get(exercise, 0)

    def set(self, exercise: str, count: int) -> None:
        with self._lock:
            self._counts[exercise] = count

    def all(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def clear(self) -> None:
        with self._lock:
            self._counts.clear()


class NavigationStateHolder:
    """Current sidebar state; replaced wholesale on every change."""

    def __init__(self) -> None:
        self._state = NavState()
        self._lock = Lock()

    def get(self) -> NavState:
        with self._lock:
            return self._state

    def put(self, state: NavState) -> NavState:
        with self._lock:
            self._state = state
            return state
