#!/usr/bin/env python3
"""Start the Discord bot and its HTTP facade with Logfire error tracking."""

import asyncio
import sys

import logfire
import uvicorn

from onboard.config import Settings, load_settings
from onboard.interface.api.app import create_app
from onboard.interface.bot.client import OnboardBot
from onboard.util.logging import setup_logging
from onboard.util.observability import configure_logfire


async def serve(settings: Settings) -> None:
    """Run the bot and uvicorn on one event loop until either stops."""
    bot = OnboardBot(settings)
    app = create_app(settings, bot.container)
    server = uvicorn.Server(
        uvicorn.Config(app, host=settings.host, port=settings.port, log_level="info")
    )

    async with bot:
        logfire.info("HTTP server listening", port=settings.port)
        await asyncio.gather(
            bot.start(settings.discord_token),
            server.serve(),
        )


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    # ConfigurationError aborts here with the list of missing variables
    settings = load_settings()

    # Configure Logfire early to catch startup errors
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting onboarding bot", business_name=settings.business_name)
        asyncio.run(serve(settings))
        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
