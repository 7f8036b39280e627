"""In-memory invite registry."""

from onboard.domain.model.invite import InviteRegistryEntry
from onboard.domain.repository.invite_registry import InviteRegistry
from onboard.domain.value import InviteCode


class InMemoryInviteRegistry(InviteRegistry):
    """Dict-backed invite registry.

    State lives for the process lifetime and is lost on restart. Entries are
    never evicted.
    """

    def __init__(self) -> None:
        self._entries: dict[InviteCode, InviteRegistryEntry] = {}

    async def save(self, entry: InviteRegistryEntry) -> InviteRegistryEntry:
        """Save an entry, replacing any previous entry for the same code."""
        self._entries[entry.invite_code] = entry
        return entry

    async def find_by_code(self, code: InviteCode) -> InviteRegistryEntry | None:
        """Find the entry for an invite code."""
        return self._entries.get(code)

    async def count(self) -> int:
        """Count stored entries."""
        return len(self._entries)
