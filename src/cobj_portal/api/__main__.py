"""
cobj_portal.api.__main__

Entrypoint for running the portal via `python -m cobj_portal.api`
(also installed as the `cobj-portal` console script).

Responsibilities:
- Load settings; exit non-zero with a descriptive message if secrets are missing.
- Create the app.
- Start uvicorn with structlog-compatible logging config.
"""

from __future__ import annotations

import sys

import uvicorn

from cobj_portal.api.app import create_app
from cobj_portal.errors import ConfigError
from cobj_portal.observability.logging import configure_logging, get_logger
from cobj_portal.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    try:
        settings = get_settings()
    except ConfigError as e:
        configure_logging(service_name="cobj-portal", level="INFO")
        log.error("config_invalid", error=str(e))
        sys.exit(1)

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,  # structlog
    )


if __name__ == "__main__":
    main()
