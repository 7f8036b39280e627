"""Invite usage cache repository interface."""

from abc import ABC, abstractmethod

from onboard.domain.model.invite import InviteUsage
from onboard.domain.value import InviteCode


class InviteUsageCache(ABC):
    """Repository holding the last observed use count per invite code."""

    @abstractmethod
    async def get_uses(self, code: InviteCode) -> int | None:
        """Get the cached use count.

        Args:
            code: The invite code

        Returns:
            Cached use count, or None if the code was never seen
        """
        pass

    @abstractmethod
    async def list_codes(self) -> list[InviteCode]:
        """List cached codes in insertion order."""
        pass

    @abstractmethod
    async def set_uses(self, code: InviteCode, uses: int) -> None:
        """Record the use count of a single invite.

        Args:
            code: The invite code
            uses: Observed use count
        """
        pass

    @abstractmethod
    async def replace_all(self, usages: list[InviteUsage]) -> None:
        """Replace the whole cache with a fresh snapshot.

        Codes absent from ``usages`` are dropped.

        Args:
            usages: Fresh invite list from the platform
        """
        pass
