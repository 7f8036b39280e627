"""Dependency injection container."""

import discord
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from onboard.config import Settings
from onboard.util.di import PROVIDERS, get_provider


def create_container(settings: Settings, client: discord.Client) -> AsyncContainer:
    """Build production container (all prod implementations).

    Args:
        settings: Loaded application settings
        client: discord.py client shared by the bot and the HTTP facade

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(
        *provider_instances,
        FastapiProvider(),
        context={Settings: settings, discord.Client: client},
    )


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
