"""Onboard member use case."""

from enum import Enum

import logfire
from pydantic import BaseModel

from onboard.adapter.error import PlatformError
from onboard.application.usecase.base import BaseUseCase
from onboard.config import Settings
from onboard.domain.model.member import JoinedMember
from onboard.domain.model.workspace import ClientWorkspace
from onboard.domain.service import (
    ChatPlatform,
    InviteAttributionService,
    InviteRegistryService,
    NamingService,
    NotificationService,
    WorkspaceService,
)
from onboard.domain.value import InviteCode


class OnboardStatus(str, Enum):
    """Outcome of a member join."""

    ONBOARDED = "onboarded"
    IGNORED = "ignored"  # Member joined some other guild
    FAILED = "failed"


class OnboardMemberRequest(BaseModel):
    """Member join event."""

    member: JoinedMember


class OnboardMemberResponse(BaseModel):
    """What the join produced."""

    status: OnboardStatus
    firstname: str | None = None
    invite_code: str | None = None
    workspace: ClientWorkspace | None = None
    notified: bool = False
    error: str | None = None


class OnboardMemberUseCase(BaseUseCase):
    """Use case for provisioning a private workspace for a new client.

    Steps run strictly in order. The first failing platform call stops the
    workflow; anything already created is left in place.
    """

    def __init__(
        self,
        platform: ChatPlatform,
        attribution_service: InviteAttributionService,
        registry_service: InviteRegistryService,
        naming_service: NamingService,
        workspace_service: WorkspaceService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            platform: Chat platform
            attribution_service: Invite attribution domain service
            registry_service: Invite registry domain service
            naming_service: Naming rules
            workspace_service: Workspace planning
            notification_service: Best-effort external notification
            settings: Application settings
        """
        self.platform = platform
        self.attribution_service = attribution_service
        self.registry_service = registry_service
        self.naming_service = naming_service
        self.workspace_service = workspace_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: OnboardMemberRequest) -> OnboardMemberResponse:
        """Execute onboard member use case.

        Args:
            request: Member join event

        Returns:
            Response describing the provisioned workspace or the failure
        """
        member = request.member

        with logfire.span(
            "onboard_member", member_id=member.id, guild_id=member.guild_id
        ):
            if member.guild_id != self.settings.guild_id:
                logfire.info("Ignoring join in foreign guild", guild_id=member.guild_id)
                return OnboardMemberResponse(status=OnboardStatus.IGNORED)

            invite_code = await self._attribute_invite()
            registered = (
                await self.registry_service.lookup(invite_code) if invite_code else None
            )
            firstname = self.naming_service.resolve_firstname(
                registered, member.display_name, member.username
            )

            plan = self.workspace_service.plan_workspace(
                member, firstname, self.platform.bot_user_id()
            )
            logfire.info(
                "Creating client workspace",
                firstname=firstname,
                category_name=plan.category_name,
                channel_name=plan.channel_name,
            )

            try:
                category_id = await self.platform.create_category(
                    plan.category_name, plan.grants
                )
                channel_id = await self.platform.create_text_channel(
                    plan.channel_name, category_id
                )
                message_id = await self.platform.send_message(
                    channel_id, plan.welcome_message
                )
            except PlatformError as e:
                logfire.error(
                    "Client workspace provisioning failed",
                    member_id=member.id,
                    firstname=firstname,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                return OnboardMemberResponse(
                    status=OnboardStatus.FAILED,
                    firstname=firstname,
                    invite_code=invite_code,
                    error=str(e),
                )

            workspace = ClientWorkspace(
                category_id=category_id,
                channel_id=channel_id,
                category_name=plan.category_name,
                channel_name=plan.channel_name,
                message_id=message_id,
            )
            logfire.info(
                "Client workspace created",
                firstname=firstname,
                category_id=category_id,
                channel_id=channel_id,
            )

            notified = await self.notification_service.notify_onboarded(
                member, firstname, plan.category_name
            )

            return OnboardMemberResponse(
                status=OnboardStatus.ONBOARDED,
                firstname=firstname,
                invite_code=invite_code,
                workspace=workspace,
                notified=notified,
            )

    async def _attribute_invite(self) -> InviteCode | None:
        try:
            invites = await self.platform.fetch_invites()
        except PlatformError as e:
            logfire.warn("Could not fetch invites, falling back", error=str(e))
            return None
        return await self.attribution_service.detect_used_invite(invites)
