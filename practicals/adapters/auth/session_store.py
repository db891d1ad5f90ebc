"""In-memory session store for the library portal."""

from threading import Lock

from practicals.components.library.models import LibrarySession

DEFAULT_MAX_SESSIONS = 10_000


class InMemorySessionStore:
    """In-memory session storage - suitable for single-process deployments.

    Holds at most `max_sessions`; the oldest session is dropped when a new
    one would exceed that.
    """

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS) -> None:
        self._sessions: dict[str, LibrarySession] = {}
        self._max_sessions = max_sessions
        self._lock = Lock()

    def get(self, session_id: str) -> LibrarySession | None:
        with self._lock:
            return self._sessions.get(session_id)

    def save(self, session_id: str, session: LibrarySession) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)
            self._sessions[session_id] = session
            while len(self._sessions) > self._max_sessions:
                # dicts keep insertion order
                del self._sessions[next(iter(self._sessions))]

    def delete(self, session_id: str) -> None:
        with self._lock:
            self._sessions.pop(session_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def clear(self) -> None:
        """Clear all sessions - useful for testing."""
        with self._lock:
            self._sessions.clear()
