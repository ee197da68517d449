"""
cobj_portal.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings (process env + optional `.env`).
- Hide the CRM access token from repr/logging.
- Fail fast with a descriptive `ConfigError` when required secrets are missing.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cobj_portal.errors import ConfigError


class Settings(BaseSettings):
    """
    Required:
    - PRIVATE_APP_ACCESS_TOKEN: HubSpot private app token (bearer credential)
    - CUSTOM_OBJECT_TYPE: custom object type id, e.g. "2-56743582"
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    service_name: str = "cobj-portal"
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # CRM
    private_app_access_token: str = Field(min_length=1, repr=False)
    custom_object_type: str = Field(min_length=1)
    hubspot_base_url: str = "https://api.hubapi.com"
    request_timeout_s: float = Field(default=15.0, gt=0)

    @field_validator("private_app_access_token", "custom_object_type", mode="before")
    @classmethod
    def _strip_required(cls, v: object) -> object:
        # Whitespace-only secrets are treated as missing.
        return v.strip() if isinstance(v, str) else v


_REQUIRED_ENV = {
    "private_app_access_token": "PRIVATE_APP_ACCESS_TOKEN",
    "custom_object_type": "CUSTOM_OBJECT_TYPE",
}


def load_settings(**overrides: object) -> Settings:
    """
    Build `Settings` and translate pydantic errors into a `ConfigError`
    naming the offending environment variables.
    """

    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems: list[str] = []
        for err in e.errors():
            field = str(err["loc"][0]) if err.get("loc") else ""
            env_name = _REQUIRED_ENV.get(field)
            if env_name is not None:
                problems.append(f"Missing {env_name} in environment or .env")
            else:
                problems.append(f"Invalid {field.upper() or 'setting'}: {err['msg']}")
        raise ConfigError("; ".join(problems)) from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-reading env/.env for each request dependency.
    return load_settings()


# --- Module Notes -----------------------------------------------------------
# Settings are loaded once at process start (see `cobj_portal.api.__main__`);
# the app factory receives the instance explicitly, which keeps tests env-free.
