"""Invite registry repository interface."""

from abc import ABC, abstractmethod

from onboard.domain.model.invite import InviteRegistryEntry
from onboard.domain.value import InviteCode


class InviteRegistry(ABC):
    """Repository mapping invite codes to the client firstname.

    Defines the contract for invite-code -> firstname bookkeeping.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def save(self, entry: InviteRegistryEntry) -> InviteRegistryEntry:
        """Save an entry (create or replace by invite code).

        Args:
            entry: The entry to save

        Returns:
            The saved entry
        """
        pass

    @abstractmethod
    async def find_by_code(self, code: InviteCode) -> InviteRegistryEntry | None:
        """Find the entry for an invite code.

        Lookups never remove the entry.

        Args:
            code: The invite code

        Returns:
            The entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count stored entries."""
        pass
