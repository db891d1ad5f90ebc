from fastapi import APIRouter, Depends, HTTPException

from practicals.adapters.memory.stores import InMemoryTodoStore
from practicals.api.deps import get_todo_store
from practicals.api.schemas import MessageResponse, TodoRequest, TodoResponse
from practicals.components.todos import TodoOutput, run_add, run_delete, run_edit, run_list

router = APIRouter()


def _raise_for(result: TodoOutput) -> None:
    if result.not_found:
        raise HTTPException(status_code=404, detail=result.error)
    raise HTTPException(status_code=400, detail=result.error)


@router.get("", response_model=list[TodoResponse])
def list_todos(store: InMemoryTodoStore = Depends(get_todo_store)) -> list[TodoResponse]:
    return [TodoResponse(id=t.id, text=t.text) for t in run_list(store)]


@router.post("", response_model=TodoResponse, status_code=201)
def add_todo(
    data: TodoRequest,
    store: InMemoryTodoStore = Depends(get_todo_store),
) -> TodoResponse:
    result = run_add(data.text, store)
    if not result.success:
        _raise_for(result)
    assert result.item is not None
    return TodoResponse(id=result.item.id, text=result.item.text)


@router.put("/{item_id}", response_model=TodoResponse)
def edit_todo(
    item_id: int,
    data: TodoRequest,
    store: InMemoryTodoStore = Depends(get_todo_store),
) -> TodoResponse:
    result = run_edit(item_id, data.text, store)
    if not result.success:
        _raise_for(result)
    assert result.item is not None
    return TodoResponse(id=result.item.id, text=result.item.text)


@router.delete("/{item_id}", response_model=MessageResponse)
def delete_todo(
    item_id: int,
    store: InMemoryTodoStore = Depends(get_todo_store),
) -> MessageResponse:
    result = run_delete(item_id, store)
    if not result.success:
        _raise_for(result)
    return MessageResponse(message="Deleted")
