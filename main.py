import logging
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.security import LOGIN_PATH, LoginRequired
from app.core.templates import render_template
from app.api.routes.pages import router as pages_router
from app.api.routes.backoffice import router as backoffice_router
from app.api.routes.leave_periods import router as leave_periods_router
from app.api.routes.popups import router as popups_router
from app.db.json_store import get_document_store

PUBLIC_DIR = Path(__file__).resolve().parent / "public"

app = FastAPI(title=settings.SITE_NAME, docs_url=None, redoc_url=None, openapi_url=None)

app.mount("/static", StaticFiles(directory=str(PUBLIC_DIR)), name="static")

app.include_router(pages_router)
app.include_router(backoffice_router)
app.include_router(leave_periods_router)
app.include_router(popups_router)


@app.exception_handler(LoginRequired)
async def redirect_to_login(request: Request, exc: LoginRequired):
    return RedirectResponse(LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)


@app.exception_handler(StarletteHTTPException)
async def not_found_page(request: Request, exc: StarletteHTTPException):
    if exc.status_code != status.HTTP_404_NOT_FOUND:
        return await http_exception_handler(request, exc)
    return render_template(request, "404.html", {"title": "Niet gevonden"}, status_code=status.HTTP_404_NOT_FOUND)


@app.on_event("startup")
async def on_startup():
    store = get_document_store()
    logging.getLogger("uvicorn.error").info("Site document at %s", store.path.resolve())
    if not settings.ADMIN_PASSWORD:
        logging.getLogger("uvicorn.error").warning(
            "ADMIN_PASSWORD is not set; backoffice login is disabled"
        )


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
