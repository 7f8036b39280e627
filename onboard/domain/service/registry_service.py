"""Invite registry domain service."""

import logfire

from onboard.domain.error import ValidationError
from onboard.domain.model.invite import InviteRegistryEntry
from onboard.domain.repository import InviteRegistry
from onboard.domain.value import Firstname, InviteCode

from .base import Service


class InviteRegistryService(Service):
    """Domain service for invite code -> firstname bookkeeping."""

    def __init__(self, invite_registry: InviteRegistry) -> None:
        """Initialize registry service.

        Args:
            invite_registry: Invite registry repository
        """
        self.invite_registry = invite_registry

    async def record(self, code: InviteCode, firstname: str) -> InviteRegistryEntry:
        """Map an invite code to a firstname (upsert).

        Args:
            code: Invite code
            firstname: Client firstname, trimmed before storing

        Returns:
            Saved entry

        Raises:
            ValidationError: If the code or the trimmed firstname is blank
        """
        if not code or not code.strip():
            raise ValidationError("inviteCode must not be blank")
        try:
            name = Firstname(firstname)
        except ValueError as e:
            raise ValidationError("firstname must not be blank") from e

        entry = await self.invite_registry.save(
            InviteRegistryEntry(invite_code=code, firstname=name)
        )
        logfire.info("Invite mapped", invite_code=code, firstname=name.root)
        return entry

    async def lookup(self, code: InviteCode) -> str | None:
        """Get the firstname mapped to a code, if any."""
        entry = await self.invite_registry.find_by_code(code)
        if entry is None:
            logfire.warn("No firstname mapped for invite", invite_code=code)
            return None
        logfire.info(
            "Invite matched to firstname",
            invite_code=code,
            firstname=entry.firstname.root,
        )
        return entry.firstname.root
