"""
Backoffice login, dashboard and logout
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from app.core.config import settings
from app.core.security import INVALID_CREDENTIALS, get_session, require_admin, verify_admin_credentials
from app.core.sessions import Session, SessionStore, get_session_store
from app.core.templates import render_template
from app.db.json_store import DocumentStore, get_document_store

router = APIRouter(prefix="/backoffice", tags=["backoffice"])
logger = logging.getLogger("uvicorn.error")


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request, session: Optional[Session] = Depends(get_session)):
    if session is not None:
        return RedirectResponse("/backoffice", status_code=status.HTTP_303_SEE_OTHER)
    return render_template(request, "backoffice/login.html", {"title": "Inloggen"})


@router.post("/login")
async def login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    sessions: SessionStore = Depends(get_session_store),
):
    if not verify_admin_credentials(username, password):
        logger.warning("Backoffice login failed for username %r", username)
        return render_template(
            request,
            "backoffice/login.html",
            {"title": "Inloggen", "error": INVALID_CREDENTIALS, "username": username},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    # Never reuse a token that existed before login
    sessions.destroy(request.cookies.get(settings.SESSION_COOKIE_NAME))
    session = sessions.create(username)
    logger.info("Backoffice login for %r", username)
    response = RedirectResponse("/backoffice", status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        session.token,
        max_age=int(sessions.max_age.total_seconds()),
        httponly=True,
        samesite="lax",
        secure=settings.COOKIE_SECURE,
    )
    return response


@router.get("", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    session: Session = Depends(require_admin),
    store: DocumentStore = Depends(get_document_store),
):
    doc = store.load()
    return render_template(request, "backoffice/dashboard.html", {
        "title": "Backoffice",
        "username": session.username,
        "leave_count": len(doc.leave_periods),
        "popup_count": len(doc.popups),
        "active_popup_count": sum(1 for p in doc.popups if p.active),
    })


@router.get("/logout")
async def logout(request: Request, sessions: SessionStore = Depends(get_session_store)):
    sessions.destroy(request.cookies.get(settings.SESSION_COOKIE_NAME))
    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return response
