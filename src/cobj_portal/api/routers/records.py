"""
cobj_portal.api.routers.records

Server-rendered pages for the configured custom object.

Responsibilities:
- `GET /`: list up to 100 records, newest first.
- `GET /update-cobj`: show the create form.
- `POST /update-cobj`: validate, create the record, redirect home.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.responses import Response
from starlette.status import (
    HTTP_303_SEE_OTHER,
    HTTP_400_BAD_REQUEST,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from cobj_portal.api.deps import crm_client, templates
from cobj_portal.crm.client import HubSpotObjectsClient
from cobj_portal.errors import RemoteApiError, ValidationError
from cobj_portal.forms import RecordForm, read_record_form
from cobj_portal.observability.logging import get_logger

log = get_logger(__name__)

router = APIRouter(tags=["records"])

HOMEPAGE_TITLE = "Homepage | Integrating With HubSpot I Practicum"
FORM_TITLE = "Update Custom Object Form | Integrating With HubSpot I Practicum"


def _render_form(
    request: Request,
    *,
    form: RecordForm | None = None,
    error: str | None = None,
    status_code: int = 200,
) -> HTMLResponse:
    context: dict[str, Any] = {
        "title": FORM_TITLE,
        "form_values": (form or RecordForm()).as_form_values(),
        "error_message": error,
    }
    return templates.TemplateResponse(request, "updates.html", context, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
async def homepage(
    request: Request,
    crm: HubSpotObjectsClient = Depends(crm_client),
) -> HTMLResponse:
    try:
        records = await crm.search_records()
    except RemoteApiError as e:
        return templates.TemplateResponse(
            request,
            "homepage.html",
            {"title": HOMEPAGE_TITLE, "records": [], "error_message": e.display_message},
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return templates.TemplateResponse(
        request,
        "homepage.html",
        {"title": HOMEPAGE_TITLE, "records": records, "error_message": None},
    )


@router.get("/update-cobj", response_class=HTMLResponse)
async def update_form(request: Request) -> HTMLResponse:
    return _render_form(request)


@router.post("/update-cobj", response_model=None)
async def update_submit(
    request: Request,
    crm: HubSpotObjectsClient = Depends(crm_client),
) -> Response:
    form = await read_record_form(request)

    try:
        properties = form.cleaned()
    except ValidationError as e:
        log.info("record_form_invalid", field=e.field)
        return _render_form(
            request, form=form, error=e.message, status_code=HTTP_400_BAD_REQUEST
        )

    try:
        await crm.create_record(**properties)
    except RemoteApiError as e:
        return _render_form(
            request,
            form=form,
            error=e.display_message,
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        )

    # 303 turns the POST into a GET of the listing, which re-fetches from the CRM.
    return RedirectResponse(url="/", status_code=HTTP_303_SEE_OTHER)


# --- Module Notes -----------------------------------------------------------
# No local state survives a request; every listing render re-queries the CRM.
