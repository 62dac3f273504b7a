from typing import Optional

from fastapi import APIRouter, Depends, Form, Path, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from app.core.config import as_bool
from app.core.security import require_admin
from app.core.templates import render_template
from app.db.json_store import DocumentStore, get_document_store
from app.schemas.popup_schema import PopupIn
from app.services.resource_manager import popup_manager

router = APIRouter(prefix="/backoffice/popups", tags=["popups"], dependencies=[Depends(require_admin)])

LIST_PATH = "/backoffice/popups"


@router.get("", response_class=HTMLResponse)
async def list_popups(request: Request, store: DocumentStore = Depends(get_document_store)):
    return render_template(request, "backoffice/popups.html", {
        "title": "Popups beheren",
        "popups": popup_manager(store).list(),
    })


@router.post("/add")
async def add_popup(
    title: str = Form(""),
    content: str = Form(""),
    active: Optional[str] = Form(None),
    store: DocumentStore = Depends(get_document_store),
):
    # Unchecked checkboxes are not submitted at all
    payload = PopupIn(title=title, content=content, active=as_bool(active))
    popup_manager(store).add(payload.model_dump())
    return RedirectResponse(LIST_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/toggle/{popup_id}")
async def toggle_popup(popup_id: int = Path(...), store: DocumentStore = Depends(get_document_store)):
    popup_manager(store).toggle(popup_id, "active")
    return RedirectResponse(LIST_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/delete/{popup_id}")
async def delete_popup(popup_id: int = Path(...), store: DocumentStore = Depends(get_document_store)):
    popup_manager(store).delete(popup_id)
    return RedirectResponse(LIST_PATH, status_code=status.HTTP_303_SEE_OTHER)
