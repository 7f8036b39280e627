"""Discord infrastructure providers."""

import discord
from dishka import Scope, from_context, provide

from onboard.adapter.discord import DiscordChatPlatform
from onboard.config import Settings
from onboard.domain.service import ChatPlatform
from onboard.domain.value import GuildId
from onboard.interface.bot.views import InviteRequestView
from onboard.util.di.base import ProviderBase


class DiscordProvider(ProviderBase):
    """Discord component base."""

    __mock_component__ = "discord"


class ProdDiscordProvider(DiscordProvider):
    """Production Discord provider.

    The discord.py client is created by the bot entrypoint and handed to the
    container as context.
    """

    __is_mock__ = False

    client = from_context(provides=discord.Client, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_chat_platform(
        self, client: discord.Client, settings: Settings
    ) -> ChatPlatform:
        """Provide Discord chat platform bound to the configured guild."""
        return DiscordChatPlatform(
            client=client,
            guild_id=GuildId(settings.guild_id),
            prompt_view=InviteRequestView,
        )
