"""
Public site pages
"""
from fastapi import APIRouter, Depends, Form, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from app.core.templates import render_template
from app.db.json_store import DocumentStore, get_document_store
from app.schemas.contact_schema import ContactIn
from app.services.contact import ContactDispatcher
from app.services.resource_manager import leave_period_manager, popup_manager
from app.utils.email import SmtpTransport, get_mail_transport

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, store: DocumentStore = Depends(get_document_store)):
    popups = [p for p in popup_manager(store).list() if p.active]
    return render_template(request, "index.html", {"title": "Home", "popups": popups})


@router.get("/treatments", response_class=HTMLResponse)
async def treatments(request: Request):
    return render_template(request, "treatments.html", {"title": "Behandelingen"})


@router.get("/info", response_class=HTMLResponse)
async def info(request: Request):
    return render_template(request, "info.html", {"title": "Informatie"})


@router.get("/contact", response_class=HTMLResponse)
async def contact_page(request: Request, store: DocumentStore = Depends(get_document_store)):
    return render_template(request, "contact.html", {
        "title": "Contact",
        "leave_periods": leave_period_manager(store).list(),
        "form": ContactIn(),
    })


@router.post("/contact", response_class=HTMLResponse)
async def submit_contact(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    subject: str = Form(""),
    message: str = Form(""),
    store: DocumentStore = Depends(get_document_store),
    transport: SmtpTransport = Depends(get_mail_transport),
):
    form = ContactIn(name=name, email=email, phone=phone, subject=subject, message=message)
    result = await run_in_threadpool(ContactDispatcher(transport).submit, form)
    context = {"title": "Contact", "leave_periods": leave_period_manager(store).list()}
    if result.ok:
        context.update({"success": result.message, "form": ContactIn()})
    else:
        # Keep what the visitor typed so they can correct it
        context.update({"error": result.message, "form": form})
    return render_template(request, "contact.html", context)
