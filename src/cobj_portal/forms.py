"""
cobj_portal.forms

Create-record form handling.

Responsibilities:
- Read `name`/`bio`/`species` from a urlencoded, multipart or JSON body.
- Validate that `name` is non-blank.
- Produce the trimmed property set sent to the CRM.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from starlette.requests import Request

from cobj_portal.errors import ValidationError

FORM_FIELDS: tuple[str, ...] = ("name", "bio", "species")


@dataclass(frozen=True, slots=True)
class RecordForm:
    """
    Submitted values exactly as received (untrimmed), used to re-populate
    the form on any error.
    """

    name: str = ""
    bio: str = ""
    species: str = ""

    def as_form_values(self) -> dict[str, str]:
        return {"name": self.name, "bio": self.bio, "species": self.species}

    def cleaned(self) -> dict[str, str]:
        """Trimmed CRM properties; raises `ValidationError` for a blank name."""
        name = self.name.strip()
        if not name:
            raise ValidationError("name", "Name is required.")
        return {
            "name": name,
            "bio": self.bio.strip(),
            "species": self.species.strip(),
        }


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


async def read_record_form(request: Request) -> RecordForm:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            raw = await request.json()
        except ValueError:
            raw = {}
        if not isinstance(raw, dict):
            raw = {}
        data: dict[str, Any] = {k: raw.get(k) for k in FORM_FIELDS}
    else:
        form = await request.form()
        # Uploaded files are not meaningful for text fields; treat them as absent.
        data = {}
        for k in FORM_FIELDS:
            v = form.get(k)
            data[k] = v if isinstance(v, str) else None

    return RecordForm(**{k: _as_str(v) for k, v in data.items()})


# --- Module Notes -----------------------------------------------------------
# Missing fields and empty fields are indistinguishable once read; both echo as "".
