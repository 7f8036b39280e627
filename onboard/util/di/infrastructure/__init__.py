"""Infrastructure providers."""

# Import bases
from .discord import DiscordProvider
from .persistence import PersistenceProvider
from .webhook import WebhookProvider

# Import implementations (needed for __subclasses__())
from .discord import ProdDiscordProvider  # noqa: F401
from .webhook import ProdWebhookProvider  # noqa: F401

__all__ = [
    "DiscordProvider",
    "PersistenceProvider",
    "ProdDiscordProvider",
    "ProdWebhookProvider",
    "WebhookProvider",
]
