"""
Template rendering utilities
"""
from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from app.core.config import settings

BASE_DIR = Path(__file__).resolve().parent.parent.parent
TEMPLATES_DIR = BASE_DIR / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["site_name"] = settings.SITE_NAME


def render_template(request: Request, template_name: str, context: dict | None = None, status_code: int = 200):
    """Render a site page with the request in its context"""
    return templates.TemplateResponse(request, template_name, context or {}, status_code=status_code)
