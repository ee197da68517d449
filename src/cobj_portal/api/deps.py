"""
cobj_portal.api.deps

FastAPI dependency wiring for the web layer.

Responsibilities:
- Expose the app-scoped CRM client created at startup.
- Provide the shared Jinja2 template environment.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from cobj_portal.crm.client import HubSpotObjectsClient

WEB_DIR = Path(__file__).resolve().parent.parent / "web"
TEMPLATES_DIR = WEB_DIR / "templates"
STATIC_CSS_DIR = WEB_DIR / "static" / "css"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def crm_client(request: Request) -> HubSpotObjectsClient:
    # Created once in `cobj_portal.api.app.create_app` startup and reused read-only.
    return request.app.state.crm  # type: ignore[attr-defined]
