"""
cobj_portal.crm.models

View model for custom object records and the remote-to-local mapping.

Responsibilities:
- Define `Record`, the shape the listing template consumes.
- Name the remote properties requested from the search endpoint.
- Convert one search `result` object into a `Record`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from cobj_portal.errors import RemoteApiError

# Order matters only for the outbound payload; the remote echoes any order back.
RECORD_PROPERTIES: tuple[str, ...] = ("name", "bio", "species", "hs_createdate")


@dataclass(frozen=True, slots=True)
class Record:
    id: str
    createdate: str
    name: str
    bio: str = ""
    species: str = ""


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def record_from_result(result: Any) -> Record:
    """
    Map a search result (`{"id": ..., "properties": {...}}`) to a `Record`.
    Missing or null properties become empty strings.
    """

    if not isinstance(result, dict):
        raise RemoteApiError(f"Malformed search result: expected object, got {type(result).__name__}")
    props = result.get("properties") or {}
    if not isinstance(props, dict):
        raise RemoteApiError("Malformed search result: 'properties' is not an object")

    return Record(
        id=_text(result.get("id")),
        createdate=_text(props.get("hs_createdate")),
        name=_text(props.get("name")),
        bio=_text(props.get("bio")),
        species=_text(props.get("species")),
    )
