from fastapi import APIRouter, Depends, HTTPException

from practicals.adapters.memory.stores import NavigationStateHolder
from practicals.api.deps import get_nav_state
from practicals.api.schemas import NavigationResponse, NavPageResponse
from practicals.components.navigation import PAGES, NavState, UnknownPageError, navigate, toggle

router = APIRouter()


def _to_response(state: NavState) -> NavigationResponse:
    return NavigationResponse(
        is_open=state.is_open,
        current=state.current,
        pages=[NavPageResponse(key=p.key, label=p.label, icon=p.icon) for p in PAGES],
    )


@router.get("", response_model=NavigationResponse)
def get_navigation(holder: NavigationStateHolder = Depends(get_nav_state)) -> NavigationResponse:
    return _to_response(holder.get())


@router.post("/toggle", response_model=NavigationResponse)
def toggle_sidebar(holder: NavigationStateHolder = Depends(get_nav_state)) -> NavigationResponse:
    return _to_response(holder.put(toggle(holder.get())))


@router.post("/navigate/{page}", response_model=NavigationResponse)
def navigate_to(
    page: str,
    holder: NavigationStateHolder = Depends(get_nav_state),
) -> NavigationResponse:
    try:
        state = navigate(holder.get(), page)
    except UnknownPageError as e:
        raise HTTPException(status_code=404, detail=f"Unknown page: {page}") from e
    return _to_response(holder.put(state))
