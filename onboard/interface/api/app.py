"""FastAPI application (HTTP facade of the bot)."""

from dishka import AsyncContainer
from fastapi import FastAPI

from onboard.config import Settings
from onboard.interface.api.routes import health, invites
from onboard.util.di.container import setup_di
from onboard.util.observability import instrument_fastapi, instrument_httpx


def create_app(settings: Settings, container: AsyncContainer) -> FastAPI:
    """Create FastAPI application.

    The container is shared with the Discord bot so both see the same
    invite registry.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Application settings
        container: DI container built by the bot entrypoint
    """
    # Instrument httpx for outbound webhook requests
    # (Logfire must be configured before instrumentation)
    instrument_httpx()

    app_instance = FastAPI(
        title=f"{settings.business_name} Onboarding Bot",
        description="Liveness and external automation hooks for the Discord onboarding bot",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(invites.router)

    return app_instance
