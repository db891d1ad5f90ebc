"""Todo list component."""

from practicals.components.todos.component import (
    MSG_EMPTY,
    run_add,
    run_delete,
    run_edit,
    run_list,
)
from practicals.components.todos.models import TodoItem, TodoOutput
from practicals.components.todos.ports import TodoStorePort

__all__ = [
    "run_add",
    "run_edit",
    "run_delete",
    "run_list",
    "MSG_EMPTY",
    "TodoItem",
    "TodoOutput",
    "TodoStorePort",
]
