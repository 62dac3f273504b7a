from fastapi import APIRouter, Depends, Form, Path, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from app.core.security import require_admin
from app.core.templates import render_template
from app.db.json_store import DocumentStore, get_document_store
from app.schemas.leave_schema import LeavePeriodIn
from app.services.resource_manager import leave_period_manager

router = APIRouter(prefix="/backoffice/verlof", tags=["leave periods"], dependencies=[Depends(require_admin)])

LIST_PATH = "/backoffice/verlof"


@router.get("", response_class=HTMLResponse)
async def list_leave_periods(request: Request, store: DocumentStore = Depends(get_document_store)):
    return render_template(request, "backoffice/verlof.html", {
        "title": "Verlof beheren",
        "leave_periods": leave_period_manager(store).list(),
    })


@router.post("/add")
async def add_leave_period(
    start_date: str = Form("", alias="startDate"),
    end_date: str = Form("", alias="endDate"),
    name: str = Form(""),
    store: DocumentStore = Depends(get_document_store),
):
    payload = LeavePeriodIn(start_date=start_date, end_date=end_date, name=name.strip() or None)
    leave_period_manager(store).add(payload.model_dump())
    return RedirectResponse(LIST_PATH, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/delete/{leave_id}")
async def delete_leave_period(leave_id: int = Path(...), store: DocumentStore = Depends(get_document_store)):
    leave_period_manager(store).delete(leave_id)
    return RedirectResponse(LIST_PATH, status_code=status.HTTP_303_SEE_OTHER)
