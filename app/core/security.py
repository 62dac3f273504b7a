import hmac
from typing import Optional

from fastapi import Depends, Request

from app.core.config import settings
from app.core.sessions import Session, SessionStore, get_session_store


LOGIN_PATH = "/backoffice/login"
INVALID_CREDENTIALS = "Ongeldige gebruikersnaam of wachtwoord."


class LoginRequired(Exception):
    """Raised by the admin guard; the app turns it into a redirect to the login page."""


def _equals(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


def verify_admin_credentials(username: str, password: str) -> bool:
    # Both comparisons always run so timing does not reveal which field was wrong
    if not settings.ADMIN_PASSWORD:
        return False
    user_ok = _equals(username or "", settings.ADMIN_USERNAME)
    pass_ok = _equals(password or "", settings.ADMIN_PASSWORD)
    return user_ok and pass_ok


def get_session(request: Request, sessions: SessionStore = Depends(get_session_store)) -> Optional[Session]:
    return sessions.get(request.cookies.get(settings.SESSION_COOKIE_NAME))


def require_admin(session: Optional[Session] = Depends(get_session)) -> Session:
    if session is None or not session.authenticated:
        raise LoginRequired()
    return session
