#!/usr/bin/env python3
"""Serve the Tymer API with uvicorn.

Logfire is configured before the app module is imported so that errors
raised while building the container are reported too.
"""

import sys

import logfire
import uvicorn

from tymer.config import Settings
from tymer.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)

    try:
        logfire.info(
            "Starting Tymer API",
            environment=settings.environment,
            host=settings.host,
            port=settings.port,
        )
        uvicorn.run(
            "tymer.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            reload=settings.environment == "development" and settings.debug,
        )
        return 0
    except Exception as e:
        logfire.error(
            "Tymer API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
