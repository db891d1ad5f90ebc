"""Gym rep counter."""

from fastapi import APIRouter, Depends

from practicals.adapters.memory.stores import InMemoryRepStore
from practicals.api.deps import get_rep_store
from practicals.api.schemas import MessageResponse, RepCountResponse, RepUpdateRequest
from practicals.components.reps import run_update

router = APIRouter()


@router.get("", response_model=dict[str, int])
def all_counts(store: InMemoryRepStore = Depends(get_rep_store)) -> dict[str, int]:
    return store.all()


@router.delete("", response_model=MessageResponse)
def reset_all(store: InMemoryRepStore = Depends(get_rep_store)) -> MessageResponse:
    store.clear()
    return MessageResponse(message="All rep counts reset")


@router.get("/{exercise}", response_model=RepCountResponse)
def get_count(
    exercise: str,
    store: InMemoryRepStore = Depends(get_rep_store),
) -> RepCountResponse:
    return RepCountResponse(exercise=exercise, count=store.get(exercise))


@router.post("/{exercise}", response_model=RepCountResponse)
def update_count(
    exercise: str,
    data: RepUpdateRequest,
    store: InMemoryRepStore = Depends(get_rep_store),
) -> RepCountResponse:
    count = run_update(exercise, data.action, data.count, store)
    return RepCountResponse(exercise=exercise, count=count)
