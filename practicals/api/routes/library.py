"""Library portal sessions, carried in a cookie."""

from fastapi import APIRouter, Cookie, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from practicals.adapters.auth.session_store import InMemorySessionStore
from practicals.adapters.clock import SystemClock
from practicals.api.deps import get_clock, get_session_store
from practicals.api.schemas import (
    LibraryLoginRequest,
    LibrarySessionResponse,
    LibrarySessionViewResponse,
)
from practicals.components.library import (
    LibrarySession,
    LoginInput,
    run_login,
    run_logout,
    run_refresh,
    run_view,
)

router = APIRouter()

SESSION_COOKIE = "library_session"


def _session_response(session: LibrarySession) -> LibrarySessionResponse:
    return LibrarySessionResponse(
        name=session.name,
        email=session.email,
        login_time=session.login_time,
        session_id=session.session_id,
        is_active=session.is_active,
    )


def _set_cookie(response: Response, session_id: str) -> None:
    response.set_cookie(key=SESSION_COOKIE, value=session_id, httponly=True, samesite="lax")


@router.post("/login", response_model=LibrarySessionResponse)
def login(
    data: LibraryLoginRequest,
    response: Response,
    store: InMemorySessionStore = Depends(get_session_store),
    clock: SystemClock = Depends(get_clock),
) -> LibrarySessionResponse | JSONResponse:
    result = run_login(LoginInput(username=data.username, email=data.email), store, clock)
    if not result.success:
        return JSONResponse(status_code=400, content={"success": False, "message": result.error})
    assert result.session is not None
    _set_cookie(response, result.session.session_id)
    return _session_response(result.session)


@router.get("/session", response_model=LibrarySessionViewResponse)
def view_session(
    library_session: str | None = Cookie(None),
    store: InMemorySessionStore = Depends(get_session_store),
    clock: SystemClock = Depends(get_clock),
) -> LibrarySessionViewResponse:
    view = run_view(library_session, store, clock)
    if view is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No active session")
    return LibrarySessionViewResponse(
        user=_session_response(view.session),
        duration=view.duration,
        login_time_formatted=view.login_time_formatted,
    )


@router.post("/refresh", response_model=LibrarySessionResponse)
def refresh_session(
    response: Response,
    library_session: str | None = Cookie(None),
    store: InMemorySessionStore = Depends(get_session_store),
    clock: SystemClock = Depends(get_clock),
) -> LibrarySessionResponse:
    result = run_refresh(library_session, store, clock)
    if not result.success or result.session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result.error)
    _set_cookie(response, result.session.session_id)
    return _session_response(result.session)


@router.post("/logout")
def logout(
    response: Response,
    library_session: str | None = Cookie(None),
    store: InMemorySessionStore = Depends(get_session_store),
) -> dict[str, str]:
    run_logout(library_session, store)
    response.delete_cookie(key=SESSION_COOKIE)
    return {"message": "Logged out"}
