"""
cobj_portal.errors

Domain exceptions shared by the settings, form and CRM layers.

Responsibilities:
- `ConfigError`: required startup configuration is missing (fatal).
- `ValidationError`: a submitted form failed local validation (HTTP 400 re-render).
- `RemoteApiError`: any failure talking to the CRM (HTTP 500 re-render).
"""

from __future__ import annotations

import json
from typing import Any


class ConfigError(Exception):
    """
    Raised while loading settings when a required value is absent or blank.
    The entry point logs the message and exits non-zero before serving.
    """


class ValidationError(Exception):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class RemoteApiError(Exception):
    """
    Failure of an outbound CRM call.

    `status_code`/`body` are set when the remote answered with an error status;
    transport failures (connect errors, timeouts) and malformed payloads carry
    only a message.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body

    @property
    def display_message(self) -> str:
        # A decoded {} or [] still counts as a body; only an empty response does not.
        if self.status_code and self.body not in (None, ""):
            encoded = json.dumps(self.body, separators=(",", ":"), ensure_ascii=False)
            return f"HubSpot API Error {self.status_code}: {encoded}"
        return f"Request failed: {self.message}"


# --- Module Notes -----------------------------------------------------------
# Handlers never retry; they catch these at the route boundary and render in place.
