"""
Gym rep counter component.

Counts are never negative. Actions: increment, decrement, reset, set.
Anything else leaves the count as it is.
"""

from __future__ import annotations

from typing import Any, Protocol


class RepStorePort(Protocol):
    def get(self, exercise: str) -> int: ...

    def set(self, exercise: str, count: int) -> None: ...

    def all(self) -> dict[str, int]: ...

    def clear(self) -> None: ...


def apply_action(current: int, action: str | None, count: Any = None) -> int:
    if action == "increment":
        return current + 1
    if action == "decrement":
        return max(0, current - 1)
    if action == "reset":
        return 0
    # bool is an int subclass but not a count
    if action == "set" and isinstance(count, (int, float)) and not isinstance(count, bool):
        return max(0, int(count))
    return current


def run_update(exercise: str, action: str | None, count: Any, store: RepStorePort) -> int:
    new_count = apply_action(store.get(exercise), action, count)
    store.set(exercise, new_count)
    return new_count
