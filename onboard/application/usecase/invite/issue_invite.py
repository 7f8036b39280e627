"""Issue invite use case."""

from enum import Enum

import logfire
from pydantic import BaseModel

from onboard.adapter.error import PlatformError
from onboard.application.usecase.base import BaseUseCase
from onboard.config import Settings
from onboard.domain.error import NotAuthorizedError, ValidationError
from onboard.domain.service import (
    ChatPlatform,
    InviteAttributionService,
    InviteRegistryService,
    StaffAuthorizationService,
)
from onboard.domain.value import ChannelId, RoleId, UserId

DENIED_MESSAGE = "⛔ You don't have permission to generate client invites."
INVALID_MESSAGE = "Please provide the client's first name."
FAILED_MESSAGE = (
    "❌ Couldn't create the invite. Please try again or ask an admin to check "
    "the bot's permissions."
)


class IssueInviteStatus(str, Enum):
    """Outcome of an invite request."""

    CREATED = "created"
    DENIED = "denied"
    INVALID = "invalid"
    FAILED = "failed"


class IssueInviteRequest(BaseModel):
    """Staff request for a client invite."""

    requester_id: int
    requester_role_ids: list[int] = []
    firstname: str


class IssueInviteResponse(BaseModel):
    """Reply shown (ephemerally) to the requester."""

    status: IssueInviteStatus
    message: str
    invite_code: str | None = None
    invite_url: str | None = None
    firstname: str | None = None


class IssueInviteUseCase(BaseUseCase):
    """Use case for creating a single-use invite bound to a client firstname."""

    def __init__(
        self,
        platform: ChatPlatform,
        authorization_service: StaffAuthorizationService,
        registry_service: InviteRegistryService,
        attribution_service: InviteAttributionService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            platform: Chat platform
            authorization_service: Staff authorization rules
            registry_service: Invite registry domain service
            attribution_service: Invite attribution domain service
            settings: Application settings
        """
        self.platform = platform
        self.authorization_service = authorization_service
        self.registry_service = registry_service
        self.attribution_service = attribution_service
        self.settings = settings

    async def execute(self, request: IssueInviteRequest) -> IssueInviteResponse:
        """Execute issue invite use case.

        Never raises for expected failures; every outcome is a reply.

        Args:
            request: Issue invite request

        Returns:
            Response carrying the reply for the requester
        """
        with logfire.span(
            "issue_invite", requester_id=request.requester_id
        ):
            try:
                self.authorization_service.ensure_authorized(
                    UserId(request.requester_id),
                    [RoleId(role_id) for role_id in request.requester_role_ids],
                )
            except NotAuthorizedError:
                return IssueInviteResponse(
                    status=IssueInviteStatus.DENIED, message=DENIED_MESSAGE
                )

            firstname = request.firstname.strip()
            if not firstname:
                return IssueInviteResponse(
                    status=IssueInviteStatus.INVALID, message=INVALID_MESSAGE
                )

            try:
                invite = await self.platform.create_invite(
                    ChannelId(self.settings.invite_target_channel_id),
                    max_uses=1,
                    max_age=0,
                    reason=f"Client invite for {firstname}",
                )
                entry = await self.registry_service.record(
                    invite.invite_code, firstname
                )
            except (PlatformError, ValidationError) as e:
                logfire.error(
                    "Failed to create invite",
                    requester_id=request.requester_id,
                    firstname=firstname,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return IssueInviteResponse(
                    status=IssueInviteStatus.FAILED, message=FAILED_MESSAGE
                )

            await self.attribution_service.track_new_invite(invite.invite_code)

            logfire.info(
                "Client invite created",
                requester_id=request.requester_id,
                invite_code=invite.invite_code,
                firstname=entry.firstname.root,
            )
            return IssueInviteResponse(
                status=IssueInviteStatus.CREATED,
                message=(
                    f"✅ Invite for **{entry.firstname.root}**: {invite.url}\n"
                    "Single use, never expires."
                ),
                invite_code=invite.invite_code,
                invite_url=invite.url,
                firstname=entry.firstname.root,
            )
