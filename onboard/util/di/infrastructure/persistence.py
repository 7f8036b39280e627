"""Persistence infrastructure providers."""

from dishka import Scope, provide

from onboard.domain.repository import InviteRegistry, InviteUsageCache
from onboard.persistence.repository.inmemory import (
    InMemoryInviteRegistry,
    InMemoryInviteUsageCache,
)
from onboard.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence provider using process-lifetime in-memory stores.

    APP scope: the bot events and the HTTP facade must see the same registry
    and usage cache.
    """

    scope = Scope.APP

    @provide
    def get_invite_registry(self) -> InviteRegistry:
        """Provide invite registry."""
        return InMemoryInviteRegistry()

    @provide
    def get_invite_usage_cache(self) -> InviteUsageCache:
        """Provide invite usage cache."""
        return InMemoryInviteUsageCache()
