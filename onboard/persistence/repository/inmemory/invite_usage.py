"""In-memory invite usage cache."""

from onboard.domain.model.invite import InviteUsage
from onboard.domain.repository.invite_usage import InviteUsageCache
from onboard.domain.value import InviteCode


class InMemoryInviteUsageCache(InviteUsageCache):
    """Dict-backed invite usage cache."""

    def __init__(self) -> None:
        self._uses: dict[InviteCode, int] = {}

    async def get_uses(self, code: InviteCode) -> int | None:
        """Get the cached use count."""
        return self._uses.get(code)

    async def list_codes(self) -> list[InviteCode]:
        """List cached codes in insertion order."""
        return list(self._uses)

    async def set_uses(self, code: InviteCode, uses: int) -> None:
        """Record the use count of a single invite."""
        self._uses[code] = uses

    async def replace_all(self, usages: list[InviteUsage]) -> None:
        """Replace the whole cache with a fresh snapshot."""
        self._uses = {usage.invite_code: usage.uses for usage in usages}

    def snapshot(self) -> dict[InviteCode, int]:
        """Copy of the current cache contents."""
        return dict(self._uses)
