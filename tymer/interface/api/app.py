"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tymer.config import Settings
from tymer.interface.api.lifespan import build_lifespan
from tymer.interface.api.routes import (
    friends,
    health,
    invitations,
    moments,
    profile,
    windows,
)
from tymer.interface.error import register_exception_handlers
from tymer.util.di.container import create_container, setup_di
from tymer.util.logging import setup_logging
from tymer.util.observability import (
    instrument_fastapi,
    instrument_httpx,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Reminders are scheduled and the capture request consumer started
    when the app starts serving; see `tymer.interface.api.lifespan`.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py if needed.
    """
    settings = Settings()
    setup_logging(settings)

    # Blob storage uploads go through httpx
    instrument_httpx()

    container = container or create_container()

    app_instance = FastAPI(
        title="Tymer API",
        description="Backend API for Tymer - share one moment a day with your circle, inside the daily windows",
        version="0.1.0",
        lifespan=build_lifespan(container),
    )

    instrument_fastapi(app_instance)

    # The session travels in the auth_token cookie
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(profile.router)
    app_instance.include_router(windows.router)
    app_instance.include_router(moments.router)
    app_instance.include_router(friends.router)
    app_instance.include_router(invitations.router)

    register_exception_handlers(app_instance)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
