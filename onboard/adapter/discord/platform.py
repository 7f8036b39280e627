"""Discord implementation of the chat platform port."""

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from itertools import count

import discord
import logfire

from onboard.adapter.error import PlatformError, PlatformPermissionError
from onboard.domain.model.invite import InviteUsage, IssuedInvite
from onboard.domain.model.workspace import PermissionGrant
from onboard.domain.service.platform import ChatPlatform
from onboard.domain.value import (
    ChannelId,
    GuildId,
    InviteCode,
    MessageId,
    PrincipalType,
    UserId,
)

@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    """Re-raise discord.py errors as platform errors."""
    try:
        yield
    except discord.Forbidden as e:
        logfire.error("Discord permission denied", action=action, error=str(e))
        raise PlatformPermissionError(f"Missing permission to {action}") from e
    except discord.HTTPException as e:
        logfire.error(
            "Discord request failed",
            action=action,
            status=e.status,
            error=str(e),
        )
        raise PlatformError(f"Failed to {action}: {e}") from e


class DiscordChatPlatform(ChatPlatform):
    """Chat platform backed by a discord.py client.

    Every call is bound to the configured guild. Entities missing from the
    client's cache (e.g. a channel created a moment ago) are fetched over
    HTTP.
    """

    def __init__(
        self,
        client: discord.Client,
        guild_id: GuildId,
        prompt_view: Callable[[], discord.ui.View],
    ) -> None:
        """Initialize Discord platform.

        Args:
            client: Logged-in discord.py client
            guild_id: Guild every operation targets
            prompt_view: Builds the view attached to the invite request prompt
        """
        self.client = client
        self.guild_id = guild_id
        self.prompt_view = prompt_view

    def is_ready(self) -> bool:
        return self.client.is_ready()

    def bot_user_id(self) -> UserId | None:
        if self.client.user is None:
            return None
        return UserId(self.client.user.id)

    async def fetch_invites(self) -> list[InviteUsage]:
        guild = await self._guild()
        with translate_errors("fetch invites"):
            invites = await guild.invites()
        return [
            InviteUsage(invite_code=InviteCode(invite.code), uses=invite.uses or 0)
            for invite in invites
        ]

    async def create_invite(
        self, channel_id: ChannelId, max_uses: int, max_age: int, reason: str
    ) -> IssuedInvite:
        channel = await self._channel(channel_id)
        with translate_errors("create invite"):
            invite = await channel.create_invite(
                max_age=max_age, max_uses=max_uses, unique=True, reason=reason
            )
        return IssuedInvite(
            invite_code=InviteCode(invite.code),
            url=invite.url,
            channel_id=channel_id,
        )

    async def create_category(
        self, name: str, grants: list[PermissionGrant]
    ) -> ChannelId:
        guild = await self._guild()
        overwrites = {
            self._principal(guild, grant): self._overwrite(grant) for grant in grants
        }
        with translate_errors("create category"):
            category = await guild.create_category(
                name, overwrites=overwrites, reason="Client onboarding"
            )
        return ChannelId(category.id)

    async def create_text_channel(self, name: str, category_id: ChannelId) -> ChannelId:
        guild = await self._guild()
        category = await self._channel(category_id)
        if not isinstance(category, discord.CategoryChannel):
            raise PlatformError(f"Channel {category_id} is not a category")
        with translate_errors("create text channel"):
            channel = await guild.create_text_channel(
                name,
                category=category,
                overwrites=category.overwrites,
                reason="Client onboarding",
            )
        return ChannelId(channel.id)

    async def send_message(self, channel_id: ChannelId, content: str) -> MessageId:
        channel = await self._channel(channel_id)
        with translate_errors("send message"):
            message = await channel.send(content)
        return MessageId(message.id)

    async def post_invite_prompt(self, channel_id: ChannelId, content: str) -> MessageId:
        channel = await self._channel(channel_id)
        with translate_errors("post invite prompt"):
            message = await channel.send(content, view=self.prompt_view())
        return MessageId(message.id)

    async def _guild(self) -> discord.Guild:
        guild = self.client.get_guild(self.guild_id)
        if guild is not None:
            return guild
        with translate_errors("fetch guild"):
            return await self.client.fetch_guild(self.guild_id)

    async def _channel(self, channel_id: ChannelId):
        channel = self.client.get_channel(channel_id)
        if channel is not None:
            return channel
        with translate_errors("fetch channel"):
            return await self.client.fetch_channel(channel_id)

    def _principal(
        self, guild: discord.Guild, grant: PermissionGrant
    ) -> discord.abc.Snowflake:
        if grant.principal_type is PrincipalType.ROLE:
            if grant.principal_id == guild.id:
                return guild.default_role
            role = guild.get_role(grant.principal_id)
            return role or discord.Object(id=grant.principal_id, type=discord.Role)

        member = guild.get_member(grant.principal_id)
        return member or discord.Object(id=grant.principal_id, type=discord.Member)

    @staticmethod
    def _overwrite(grant: PermissionGrant) -> discord.PermissionOverwrite:
        overwrite = discord.PermissionOverwrite()
        for permission in grant.allow:
            setattr(overwrite, permission.value, True)
        for permission in grant.deny:
            setattr(overwrite, permission.value, False)
        return overwrite


class MockChatPlatform(ChatPlatform):
    """In-memory chat platform for testing.

    Records every side effect. Tests script the invite list through
    ``invites`` and make an operation raise by putting an exception in
    ``failures`` under the method name.
    """

    def __init__(self, ready: bool = True, bot_id: int = 1000) -> None:
        self.ready = ready
        self.bot_id = bot_id
        self.invites: list[InviteUsage] = []
        self.failures: dict[str, Exception] = {}

        self.created_invites: list[dict] = []
        self.categories: list[dict] = []
        self.text_channels: list[dict] = []
        self.messages: list[dict] = []
        self.prompts: list[dict] = []

        self._ids = count(5000)
        self._invite_codes = count(1)

    def _maybe_fail(self, operation: str) -> None:
        error = self.failures.get(operation)
        if error is not None:
            raise error

    def is_ready(self) -> bool:
        return self.ready

    def bot_user_id(self) -> UserId | None:
        return UserId(self.bot_id) if self.ready else None

    async def fetch_invites(self) -> list[InviteUsage]:
        self._maybe_fail("fetch_invites")
        return list(self.invites)

    async def create_invite(
        self, channel_id: ChannelId, max_uses: int, max_age: int, reason: str
    ) -> IssuedInvite:
        self._maybe_fail("create_invite")
        code = InviteCode(f"mock{next(self._invite_codes)}")
        self.created_invites.append(
            {
                "code": code,
                "channel_id": channel_id,
                "max_uses": max_uses,
                "max_age": max_age,
                "reason": reason,
            }
        )
        return IssuedInvite(
            invite_code=code, url=f"https://discord.gg/{code}", channel_id=channel_id
        )

    async def create_category(
        self, name: str, grants: list[PermissionGrant]
    ) -> ChannelId:
        self._maybe_fail("create_category")
        category_id = ChannelId(next(self._ids))
        self.categories.append({"id": category_id, "name": name, "grants": grants})
        return category_id

    async def create_text_channel(self, name: str, category_id: ChannelId) -> ChannelId:
        self._maybe_fail("create_text_channel")
        channel_id = ChannelId(next(self._ids))
        self.text_channels.append(
            {"id": channel_id, "name": name, "category_id": category_id}
        )
        return channel_id

    async def send_message(self, channel_id: ChannelId, content: str) -> MessageId:
        self._maybe_fail("send_message")
        message_id = MessageId(next(self._ids))
        self.messages.append(
            {"id": message_id, "channel_id": channel_id, "content": content}
        )
        return message_id

    async def post_invite_prompt(self, channel_id: ChannelId, content: str) -> MessageId:
        self._maybe_fail("post_invite_prompt")
        message_id = MessageId(next(self._ids))
        self.prompts.append(
            {"id": message_id, "channel_id": channel_id, "content": content}
        )
        return message_id
