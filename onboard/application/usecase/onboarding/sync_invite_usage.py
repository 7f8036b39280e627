"""Sync invite usage use case."""

import logfire
from pydantic import BaseModel

from onboard.adapter.error import PlatformError
from onboard.application.usecase.base import BaseUseCase
from onboard.domain.service import ChatPlatform, InviteAttributionService


class SyncInviteUsageResponse(BaseModel):
    """Startup cache refresh outcome."""

    synced: bool
    invite_count: int = 0


class SyncInviteUsageUseCase(BaseUseCase):
    """Use case for seeding the usage cache when the bot becomes ready."""

    def __init__(
        self, platform: ChatPlatform, attribution_service: InviteAttributionService
    ) -> None:
        self.platform = platform
        self.attribution_service = attribution_service

    async def execute(self, request: None = None) -> SyncInviteUsageResponse:
        try:
            invites = await self.platform.fetch_invites()
        except PlatformError as e:
            logfire.error("Error caching invites", error=str(e))
            return SyncInviteUsageResponse(synced=False)

        await self.attribution_service.refresh(invites)
        return SyncInviteUsageResponse(synced=True, invite_count=len(invites))
