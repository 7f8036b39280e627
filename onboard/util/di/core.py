"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context

from onboard.config import Settings
from onboard.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded once at startup (see ``load_settings``) and handed to
    the container as context, so a configuration error aborts before the bot
    connects.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)
