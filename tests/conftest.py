"""
tests.conftest

Shared fixtures: settings, a fake HubSpot API (httpx.MockTransport) and an
in-process client for the portal app.
"""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from typing import Any

import httpx
import pytest
import pytest_asyncio

from cobj_portal.api.app import create_app
from cobj_portal.settings import Settings

OBJECT_TYPE = "2-56743582"
TOKEN = "pat-test-token"


class FakeHubSpot:
    """
    Records every outbound request and answers from configurable factories.
    A factory may raise an httpx exception to simulate a transport failure.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.on_search: Callable[[httpx.Request], httpx.Response] = lambda req: httpx.Response(
            200, json={"results": []}
        )
        self.on_create: Callable[[httpx.Request], httpx.Response] = lambda req: httpx.Response(
            201, json={"id": "901", "properties": {}}
        )

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == f"/crm/v3/objects/{OBJECT_TYPE}/search":
            return self.on_search(request)
        if request.url.path == f"/crm/v3/objects/{OBJECT_TYPE}":
            return self.on_create(request)
        return httpx.Response(404, json={"message": "unknown path"})

    def calls_to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content)


def search_result(record_id: str, **props: Any) -> dict[str, Any]:
    return {"id": record_id, "properties": props, "archived": False}


@pytest.fixture
def settings() -> Settings:
    return Settings(
        private_app_access_token=TOKEN,
        custom_object_type=OBJECT_TYPE,
        _env_file=None,
    )


@pytest.fixture
def fake_hubspot() -> FakeHubSpot:
    return FakeHubSpot()


@pytest_asyncio.fixture
async def portal(settings: Settings, fake_hubspot: FakeHubSpot) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings, transport=httpx.MockTransport(fake_hubspot.handle))

    # httpx ASGITransport does not manage lifespan automatically; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
