"""Mock providers for testing."""

from .discord_platform import MockDiscordProvider
from .webhook import MockWebhookProvider
from .container import build_test_container

__all__ = [
    "MockDiscordProvider",
    "MockWebhookProvider",
    "build_test_container",
]
