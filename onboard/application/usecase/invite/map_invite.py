"""Map invite use case (external automation webhook)."""

import logfire
from pydantic import BaseModel

from onboard.application.usecase.base import BaseUseCase
from onboard.domain.error import ValidationError
from onboard.domain.service import InviteRegistryService
from onboard.domain.value import InviteCode


class MapInviteRequest(BaseModel):
    """Invite code -> firstname mapping posted by an external tool."""

    invite_code: str | None = None
    firstname: str | None = None


class MapInviteResponse(BaseModel):
    """Stored mapping."""

    invite_code: str
    firstname: str


class MapInviteUseCase(BaseUseCase):
    """Use case for recording a mapping created outside Discord."""

    def __init__(self, registry_service: InviteRegistryService) -> None:
        """Initialize use case.

        Args:
            registry_service: Invite registry domain service
        """
        self.registry_service = registry_service

    async def execute(self, request: MapInviteRequest) -> MapInviteResponse:
        """Upsert the mapping.

        Raises:
            ValidationError: If inviteCode or firstname is missing or blank
        """
        invite_code = (request.invite_code or "").strip()
        firstname = (request.firstname or "").strip()
        if not invite_code or not firstname:
            logfire.warn(
                "Rejected invite mapping",
                has_invite_code=bool(request.invite_code),
                has_firstname=bool(request.firstname),
            )
            raise ValidationError("inviteCode and firstname required")

        entry = await self.registry_service.record(
            InviteCode(invite_code), firstname
        )
        return MapInviteResponse(
            invite_code=entry.invite_code, firstname=entry.firstname.root
        )
