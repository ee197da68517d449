"""
tests.test_smoke

Minimal smoke tests to validate the portal boots and serves its ambient endpoints.
"""

from __future__ import annotations

import httpx
import pytest

from cobj_portal.api.app import create_app


@pytest.mark.asyncio
async def test_health_endpoint(portal: httpx.AsyncClient) -> None:
    r = await portal.get("/healthz")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_request_id_is_generated_or_echoed(portal: httpx.AsyncClient) -> None:
    r = await portal.get("/healthz")
    assert r.headers.get("x-request-id")

    r = await portal.get("/healthz", headers={"x-request-id": "abc-123"})
    assert r.headers["x-request-id"] == "abc-123"


@pytest.mark.asyncio
async def test_stylesheet_is_served(portal: httpx.AsyncClient) -> None:
    r = await portal.get("/css/style.css")
    assert r.status_code == 200
    assert "text/css" in r.headers["content-type"]


@pytest.mark.asyncio
async def test_form_page_renders_empty(portal: httpx.AsyncClient) -> None:
    r = await portal.get("/update-cobj")
    assert r.status_code == 200
    assert "<title>Update Custom Object Form | Integrating With HubSpot I Practicum</title>" in r.text
    assert 'name="name" value=""' in r.text
    assert 'role="alert"' not in r.text


@pytest.mark.asyncio
async def test_lifespan_opens_and_closes_crm_client(settings) -> None:
    app = create_app(settings=settings, transport=httpx.MockTransport(lambda req: httpx.Response(200)))

    async with app.router.lifespan_context(app):
        http = app.state.http
        assert not http.is_closed
        assert app.state.crm is not None
    assert http.is_closed
