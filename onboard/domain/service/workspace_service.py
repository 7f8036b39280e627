"""Client workspace planning domain service."""

from onboard.domain.model.member import JoinedMember
from onboard.domain.model.workspace import PermissionGrant, WorkspacePlan
from onboard.domain.value import (
    ChannelId,
    GuildId,
    Permission,
    PrincipalType,
    RoleId,
    UserId,
)

from .base import Service
from .naming_service import NamingService

MEMBER_ACCESS = frozenset({Permission.VIEW_CHANNEL, Permission.SEND_MESSAGES})
HIDDEN = frozenset({Permission.VIEW_CHANNEL})


def mention_users(user_ids: list[UserId], fallback: str) -> str:
    if not user_ids:
        return fallback
    return " & ".join(f"<@{user_id}>" for user_id in user_ids)


def mention_user(user_id: UserId | None, fallback: str) -> str:
    if not user_id:
        return fallback
    return f"<@{user_id}>"


def mention_channel(channel_id: ChannelId | None, fallback: str) -> str:
    if not channel_id:
        return fallback
    return f"<#{channel_id}>"


class WorkspaceService(Service):
    """Builds the plan for a client's private category and channel.

    Planning is pure: no platform calls happen here, the onboarding use case
    executes the returned plan.
    """

    def __init__(
        self,
        naming_service: NamingService,
        staff_role_ids: list[RoleId],
        founder_user_ids: list[UserId],
        csm_user_ids: list[UserId],
        operations_user_id: UserId | None,
        start_here_channel_id: ChannelId | None,
    ) -> None:
        """Initialize workspace service.

        Args:
            naming_service: Naming rules
            staff_role_ids: Roles granted access to every client workspace
            founder_user_ids: Founders, mentioned and granted access
            csm_user_ids: Client-success staff, mentioned and granted access
            operations_user_id: Operations contact, mentioned and granted access
            start_here_channel_id: Channel linked from the welcome message
        """
        self.naming_service = naming_service
        self.staff_role_ids = staff_role_ids
        self.founder_user_ids = founder_user_ids
        self.csm_user_ids = csm_user_ids
        self.operations_user_id = operations_user_id
        self.start_here_channel_id = start_here_channel_id

    def plan_workspace(
        self, member: JoinedMember, firstname: str, bot_user_id: UserId | None
    ) -> WorkspacePlan:
        """Describe the category, channel and message for a new client.

        Args:
            member: Member who joined
            firstname: Resolved client firstname
            bot_user_id: The bot's own user id (granted access when known)

        Returns:
            Workspace plan
        """
        return WorkspacePlan(
            member_id=member.id,
            firstname=firstname,
            category_name=self.naming_service.category_name(firstname),
            channel_name=self.naming_service.channel_name(firstname),
            grants=self.build_grants(member.guild_id, member.id, bot_user_id),
            welcome_message=self.welcome_message(member.id),
        )

    def build_grants(
        self, guild_id: GuildId, member_id: UserId, bot_user_id: UserId | None
    ) -> list[PermissionGrant]:
        """Permission overwrites for a client category.

        @everyone (whose role id equals the guild id) is denied view; the
        client, the bot, staff roles and team members may view and send.
        """
        grants: dict[tuple[PrincipalType, int], PermissionGrant] = {}

        def grant(principal_id: int, principal_type: PrincipalType) -> None:
            key = (principal_type, principal_id)
            if key not in grants:
                grants[key] = PermissionGrant(
                    principal_id=principal_id,
                    principal_type=principal_type,
                    allow=MEMBER_ACCESS,
                )

        grants[(PrincipalType.ROLE, guild_id)] = PermissionGrant(
            principal_id=guild_id,
            principal_type=PrincipalType.ROLE,
            deny=HIDDEN,
        )
        grant(member_id, PrincipalType.MEMBER)
        if bot_user_id:
            grant(bot_user_id, PrincipalType.MEMBER)
        for role_id in self.staff_role_ids:
            grant(role_id, PrincipalType.ROLE)
        for user_id in self.team_user_ids:
            grant(user_id, PrincipalType.MEMBER)
        return list(grants.values())

    @property
    def team_user_ids(self) -> list[UserId]:
        ids = [*self.founder_user_ids, *self.csm_user_ids]
        if self.operations_user_id:
            ids.append(self.operations_user_id)
        return ids

    def welcome_message(self, member_id: UserId) -> str:
        """Compose the single onboarding message."""
        business_name = self.naming_service.business_name
        founders = mention_users(self.founder_user_ids, "Founder")
        csms = mention_users(self.csm_user_ids, "CSM")
        ops = mention_user(self.operations_user_id, "Operations")
        start_here = mention_channel(self.start_here_channel_id, "#start-here")

        # Trailing double spaces are markdown line breaks
        return (
            f"✨ **Welcome to {business_name}!**\n"
            "\n"
            f"Hey <@{member_id}>, welcome aboard.\n"
            "\n"
            "👥 **Your Team**\n"
            f"{founders} – **Founder**  \n"
            f"{csms} – **Client Success**  \n"
            f"{ops} – **Operations**\n"
            "\n"
            f"**Next step:** Head over to {start_here} to complete your intake form."
        )
