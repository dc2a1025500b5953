"""Observability configuration using Logfire.

Services open a span per operation and attach structured events to it:

    import logfire

    with logfire.span("invitation_service.accept", acceptor_id=str(user_id)):
        logfire.info("Invitation accepted", invitation_id=str(invitation.id))

FastAPI, SQLAlchemy and httpx are instrumented once at startup.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tymer.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the current environment.

    Telemetry goes to Logfire cloud when `OBSERVABILITY__SEND_TO_LOGFIRE`
    says so, or else when a token is configured. Otherwise it stays on
    the console. The test environment keeps the console quiet.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    console: logfire.ConsoleOptions | bool = logfire.ConsoleOptions(
        colors="auto",
        span_style="show-parents",
        include_timestamps=True,
        verbose=settings.debug,
    )
    if settings.environment == "test":
        console = False

    config_kwargs: dict[str, Any] = {
        "service_name": "tymer-backend",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": console,
    }
    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
        has_token=bool(settings.observability.logfire_token),
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by the app.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    # Session cookies stay out of the traces
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries and transactions on the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # Add SQL comments with span context
    )
    logfire.info("SQLAlchemy instrumented")


def instrument_httpx() -> None:
    """Trace outbound requests to the blob store."""
    logfire.instrument_httpx()
    logfire.info("httpx instrumented")
