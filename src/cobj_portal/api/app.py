"""
cobj_portal.api.app

FastAPI app factory for the custom object portal.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Serve the stylesheet directory under `/css`.
- Create and dispose the shared outbound CRM client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from starlette.staticfiles import StaticFiles

from cobj_portal import __version__
from cobj_portal.api.deps import STATIC_CSS_DIR
from cobj_portal.api.routers.health import router as health_router
from cobj_portal.api.routers.records import router as records_router
from cobj_portal.crm.client import HubSpotObjectsClient, build_http_client
from cobj_portal.observability.logging import configure_logging, get_logger
from cobj_portal.observability.middleware import RequestContextMiddleware
from cobj_portal.settings import Settings

log = get_logger(__name__)


def create_app(
    *,
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    `transport` replaces the network transport of the outbound CRM client
    (tests pass an `httpx.MockTransport`).
    """

    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        fmt=settings.log_format,
    )

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        http = build_http_client(settings, transport=transport)
        app.state.http = http
        app.state.crm = HubSpotObjectsClient(http=http, object_type=settings.custom_object_type)
        log.info(
            "startup",
            object_type=settings.custom_object_type,
            crm_base_url=settings.hubspot_base_url,
        )
        try:
            yield
        finally:
            await http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Custom Object Portal",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=_lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.mount("/css", StaticFiles(directory=str(STATIC_CSS_DIR)), name="css")
    app.include_router(health_router, tags=["health"])
    app.include_router(records_router)

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; page logic stays
# in `api.routers.records` and CRM details in `crm.client`.
