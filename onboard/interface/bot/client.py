"""Discord bot client."""

from datetime import datetime, timezone

import discord
import logfire
from discord.ext import commands

from onboard.application.usecase.onboarding import (
    OnboardMemberRequest,
    OnboardMemberUseCase,
    SyncInviteUsageUseCase,
)
from onboard.config import Settings
from onboard.domain.model.member import JoinedMember
from onboard.domain.value import GuildId, UserId
from onboard.interface.bot.commands import OnboardCommandTree, create_invite
from onboard.interface.bot.views import InviteRequestView
from onboard.util.di.container import create_container


def build_intents() -> discord.Intents:
    """Gateway intents: guild structure, member joins and invite events."""
    intents = discord.Intents.default()
    intents.guilds = True
    intents.members = True
    intents.invites = True
    return intents


def to_joined_member(member: discord.Member) -> JoinedMember:
    """Copy the fields onboarding needs out of a discord.py member."""
    return JoinedMember(
        id=UserId(member.id),
        guild_id=GuildId(member.guild.id),
        display_name=member.display_name,
        username=member.name,
        tag=str(member),
        joined_at=member.joined_at or datetime.now(timezone.utc),
    )


class OnboardBot(commands.Bot):
    """Onboarding bot.

    Owns the DI container; the HTTP facade is built on the same container
    so both sides share the invite registry and usage cache.
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=build_intents(),
            tree_cls=OnboardCommandTree,
        )
        self.settings = settings
        self.container = create_container(settings=settings, client=self)

    async def setup_hook(self) -> None:
        # Persistent view: routes clicks on buttons posted before a restart
        self.add_view(InviteRequestView())

        guild = discord.Object(id=self.settings.guild_id)
        self.tree.add_command(create_invite, guild=guild)
        try:
            synced = await self.tree.sync(guild=guild)
            logfire.info("Slash commands synced", count=len(synced))
        except discord.HTTPException as e:
            logfire.error("Slash command sync failed", error=str(e))

    async def on_ready(self) -> None:
        logfire.info(
            "Logged in",
            user=str(self.user),
            guild_id=self.settings.guild_id,
        )
        async with self.container() as request_container:
            use_case = await request_container.get(SyncInviteUsageUseCase)
            await use_case.execute()

    async def on_member_join(self, member: discord.Member) -> None:
        try:
            async with self.container() as request_container:
                use_case = await request_container.get(OnboardMemberUseCase)
                await use_case.execute(
                    OnboardMemberRequest(member=to_joined_member(member))
                )
        except Exception as e:
            logfire.error(
                "Error in member join handler",
                member_id=member.id,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=e,
            )

    async def close(self) -> None:
        if self.is_closed():
            return
        await super().close()
        await self.container.close()
