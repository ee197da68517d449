"""
cobj_portal.crm.client

HTTP client boundary used by the web layer to call the HubSpot CRM v3 API.

Responsibilities:
- Build the single, long-lived `httpx.AsyncClient` (base URL, bearer auth, timeout).
- Search records of the configured custom object type (newest first).
- Create a record of that type.
- Normalize every failure into `RemoteApiError`.
"""

from __future__ import annotations

from typing import Any

import httpx

from cobj_portal.crm.models import RECORD_PROPERTIES, Record, record_from_result
from cobj_portal.errors import RemoteApiError
from cobj_portal.observability.logging import get_logger
from cobj_portal.settings import Settings

log = get_logger(__name__)

SEARCH_LIMIT = 100


def build_http_client(
    settings: Settings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    # One instance per process; handlers share it read-only via app.state.
    return httpx.AsyncClient(
        base_url=settings.hubspot_base_url.rstrip("/"),
        headers={
            "Authorization": f"Bearer {settings.private_app_access_token}",
            "Content-Type": "application/json",
        },
        timeout=httpx.Timeout(settings.request_timeout_s),
        transport=transport,
    )


def _decode_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text


def _transport_message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class HubSpotObjectsClient:
    """
    Thin wrapper over `/crm/v3/objects/{object_type}`.
    No retries: a failed call fails the calling request immediately.
    """

    def __init__(self, *, http: httpx.AsyncClient, object_type: str) -> None:
        self._http = http
        self._object_type = object_type

    async def _post(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        try:
            r = await self._http.post(path, json=payload)
        except httpx.HTTPError as e:
            log.warning("crm_request_failed", url_path=path, err=_transport_message(e))
            raise RemoteApiError(_transport_message(e)) from e

        if r.status_code >= 400:
            body = _decode_body(r)
            log.warning("crm_request_failed", url_path=path, status=r.status_code)
            raise RemoteApiError(
                f"Request failed with status code {r.status_code}",
                status_code=r.status_code,
                body=body,
            )
        return r

    async def search_records(self) -> list[Record]:
        path = f"/crm/v3/objects/{self._object_type}/search"
        r = await self._post(
            path,
            {
                "filterGroups": [],
                "sorts": ["-hs_createdate"],
                "properties": list(RECORD_PROPERTIES),
                "limit": SEARCH_LIMIT,
            },
        )
        try:
            data = r.json()
        except ValueError as e:
            raise RemoteApiError("Malformed search response: body is not JSON") from e
        if not isinstance(data, dict):
            raise RemoteApiError("Malformed search response: expected a JSON object")

        results = data.get("results") or []
        if not isinstance(results, list):
            raise RemoteApiError("Malformed search response: 'results' is not a list")

        # Remote ordering is authoritative (including ties on hs_createdate).
        records = [record_from_result(item) for item in results]
        log.info("crm_search_ok", object_type=self._object_type, count=len(records))
        return records

    async def create_record(self, *, name: str, bio: str, species: str) -> dict[str, Any]:
        path = f"/crm/v3/objects/{self._object_type}"
        r = await self._post(
            path,
            {"properties": {"name": name, "bio": bio, "species": species}},
        )
        created = _decode_body(r)
        created_id = created.get("id") if isinstance(created, dict) else None
        log.info("crm_record_created", object_type=self._object_type, record_id=created_id)
        return created if isinstance(created, dict) else {}


# --- Module Notes -----------------------------------------------------------
# The create response body is informational only; the listing view re-fetches.
