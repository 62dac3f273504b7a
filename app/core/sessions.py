import secrets
import threading
from datetime import datetime, timedelta
from typing import Optional

from app.core.config import settings


class Session:
    token: str
    authenticated: bool
    username: str
    created_at: datetime

    def __init__(self, token: str, username: str, created_at: datetime) -> None:
        self.token = token
        self.authenticated = True
        self.username = username
        self.created_at = created_at


class SessionStore:
    """Process-local server-side sessions keyed by an opaque cookie token.

    Nothing survives a process restart.
    """

    def __init__(self, max_age: timedelta | None = None) -> None:
        self.max_age = max_age or timedelta(hours=settings.SESSION_MAX_AGE_HOURS)
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def _expired(self, session: Session, now: datetime) -> bool:
        return session.created_at + self.max_age <= now

    def create(self, username: str) -> Session:
        token = secrets.token_urlsafe(32)
        now = datetime.utcnow()
        session = Session(token=token, username=username, created_at=now)
        with self._lock:
            # Drop abandoned sessions so the store does not grow unbounded
            for stale in [t for t, s in self._sessions.items() if self._expired(s, now)]:
                del self._sessions[stale]
            self._sessions[token] = session
        return session

    def get(self, token: str | None) -> Optional[Session]:
        if not token:
            return None
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                return None
            if self._expired(session, datetime.utcnow()):
                del self._sessions[token]
                return None
            return session

    def destroy(self, token: str | None) -> None:
        if not token:
            return
        with self._lock:
            self._sessions.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)


_session_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    global _session_store
    if _session_store is None:
        _session_store = SessionStore()
    return _session_store
