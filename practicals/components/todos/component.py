"""
Todo list component.

Tasks are plain strings kept in insertion order and addressed by id.
Blank tasks are rejected on add and edit.
"""

from __future__ import annotations

from .models import TodoItem, TodoOutput
from .ports import TodoStorePort

MSG_EMPTY = "Task cannot be empty"


def run_add(text: str | None, store: TodoStorePort) -> TodoOutput:
    cleaned = (text or "").strip()
    if not cleaned:
        return TodoOutput(success=False, error=MSG_EMPTY)
    return TodoOutput(success=True, item=store.add(cleaned))


def run_edit(item_id: int, text: str | None, store: TodoStorePort) -> TodoOutput:
    if store.get(item_id) is None:
        return TodoOutput(success=False, error="Task not found", not_found=True)
    # Edits keep the text as typed once it is known to be non-blank
    if text is None or not text.strip():
        return TodoOutput(success=False, error=MSG_EMPTY)
    return TodoOutput(success=True, item=store.update(item_id, text))


def run_delete(item_id: int, store: TodoStorePort) -> TodoOutput:
    if not store.delete(item_id):
        return TodoOutput(success=False, error="Task not found", not_found=True)
    return TodoOutput(success=True)


def run_list(store: TodoStorePort) -> list[TodoItem]:
    return store.list_all()
