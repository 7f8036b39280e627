"""Post invite button use case."""

import secrets
from enum import Enum

import logfire
from pydantic import BaseModel

from onboard.adapter.error import PlatformError
from onboard.application.usecase.base import BaseUseCase
from onboard.config import Settings
from onboard.domain.service import ChatPlatform
from onboard.domain.value import ChannelId

INVITE_PROMPT = (
    "🎟️ **Client invites**\n"
    "Press the button below and enter the client's first name to generate a "
    "single-use invite link."
)


class PostInviteButtonStatus(str, Enum):
    """Outcome of a repost request."""

    POSTED = "posted"
    UNAUTHORIZED = "unauthorized"
    NOT_READY = "not_ready"
    FAILED = "failed"


class PostInviteButtonRequest(BaseModel):
    """Repost request carrying the shared secret header value."""

    secret: str | None = None


class PostInviteButtonResponse(BaseModel):
    """Repost outcome."""

    status: PostInviteButtonStatus
    message_id: int | None = None


class PostInviteButtonUseCase(BaseUseCase):
    """Use case for (re)posting the staff invite button."""

    def __init__(self, platform: ChatPlatform, settings: Settings) -> None:
        """Initialize use case.

        Args:
            platform: Chat platform
            settings: Application settings
        """
        self.platform = platform
        self.settings = settings

    def _secret_matches(self, provided: str | None) -> bool:
        expected = self.settings.zapier_secret
        if not expected or not provided:
            return False
        return secrets.compare_digest(provided.encode(), expected.encode())

    async def execute(
        self, request: PostInviteButtonRequest
    ) -> PostInviteButtonResponse:
        """Check the secret and readiness, then post the prompt."""
        if not self._secret_matches(request.secret):
            logfire.warn("Invite button repost rejected: bad secret")
            return PostInviteButtonResponse(status=PostInviteButtonStatus.UNAUTHORIZED)

        if not self.platform.is_ready():
            logfire.warn("Invite button repost rejected: Discord not ready")
            return PostInviteButtonResponse(status=PostInviteButtonStatus.NOT_READY)

        channel_id = ChannelId(self.settings.invite_request_channel_id)
        try:
            message_id = await self.platform.post_invite_prompt(
                channel_id, INVITE_PROMPT
            )
        except PlatformError as e:
            logfire.error(
                "Failed to post invite button",
                channel_id=channel_id,
                error=str(e),
            )
            return PostInviteButtonResponse(status=PostInviteButtonStatus.FAILED)

        logfire.info("Invite button posted", channel_id=channel_id)
        return PostInviteButtonResponse(
            status=PostInviteButtonStatus.POSTED, message_id=message_id
        )
