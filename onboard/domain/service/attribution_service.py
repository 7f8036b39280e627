"""Invite attribution domain service."""

import logfire

from onboard.domain.model.invite import InviteUsage
from onboard.domain.repository import InviteRegistry, InviteUsageCache
from onboard.domain.value import InviteCode

from .base import Service


class InviteAttributionService(Service):
    """Works out which invite the newest member joined with.

    Discord does not say which invite a member used, so the service diffs
    the guild's current invite list against the cached use counts.

    Known limitation: two joins landing between refreshes both increase
    counts; the last increased invite in iteration order is attributed and
    the other join falls back to its display name.
    """

    def __init__(
        self, usage_cache: InviteUsageCache, invite_registry: InviteRegistry
    ) -> None:
        """Initialize attribution service.

        Args:
            usage_cache: Last observed use count per invite code
            invite_registry: Staff-issued invite codes
        """
        self.usage_cache = usage_cache
        self.invite_registry = invite_registry

    async def detect_used_invite(
        self, current: list[InviteUsage]
    ) -> InviteCode | None:
        """Find the invite whose use count increased and resync the cache.

        An increase on a cached code beats a code seen for the first time,
        which is compared against zero. When nothing increased, a cached registry code that disappeared from
        the list is attributed instead: Discord deletes single-use invites
        once they are consumed.

        Args:
            current: Fresh invite list from the platform

        Returns:
            Code of the used invite, or None if attribution failed
        """
        with logfire.span("attribution.detect_used_invite", invites=len(current)):
            used: InviteCode | None = None
            first_seen: InviteCode | None = None
            for usage in current:
                previous = await self.usage_cache.get_uses(usage.invite_code)
                if previous is None:
                    if usage.uses > 0:
                        first_seen = usage.invite_code
                elif usage.uses > previous:
                    used = usage.invite_code

            # A code the cache never saw only counts when no cached code moved
            if used is None:
                used = first_seen

            if used is None:
                used = await self._find_consumed_registry_invite(current)

            await self.usage_cache.replace_all(current)

            if used is None:
                logfire.warn("No used invite found")
            else:
                logfire.info("Used invite detected", invite_code=used)
            return used

    async def refresh(self, current: list[InviteUsage]) -> None:
        """Overwrite the cache without attributing anything (startup)."""
        await self.usage_cache.replace_all(current)
        logfire.info("Cached existing invites", count=len(current))

    async def track_new_invite(self, code: InviteCode) -> None:
        """Start tracking an invite created by the bot itself.

        A single-use invite consumed before the next refresh is only found
        by the vanished-invite check if its code is already cached.
        """
        await self.usage_cache.set_uses(code, 0)

    async def _find_consumed_registry_invite(
        self, current: list[InviteUsage]
    ) -> InviteCode | None:
        listed = {usage.invite_code for usage in current}
        consumed: InviteCode | None = None
        for code in await self.usage_cache.list_codes():
            if code in listed:
                continue
            if await self.invite_registry.find_by_code(code) is not None:
                consumed = code
        return consumed
