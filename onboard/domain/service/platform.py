"""Chat platform port.

The onboarding workflows only talk to Discord through this interface. The
discord.py implementation lives in ``onboard.adapter.discord``.
"""

from onboard.domain.model.invite import InviteUsage, IssuedInvite
from onboard.domain.model.workspace import PermissionGrant
from onboard.domain.value import ChannelId, MessageId, UserId


class ChatPlatform:
    """Generic chat platform interface bound to the configured guild."""

    def is_ready(self) -> bool:
        """Whether the gateway connection is established."""
        raise NotImplementedError

    def bot_user_id(self) -> UserId | None:
        """The bot's own user id, None before login."""
        raise NotImplementedError

    async def fetch_invites(self) -> list[InviteUsage]:
        """Fetch every invite of the guild with its current use count.

        Raises:
            PlatformPermissionError: If the bot cannot read invites
            PlatformError: On any other platform failure
        """
        raise NotImplementedError

    async def create_invite(
        self, channel_id: ChannelId, max_uses: int, max_age: int, reason: str
    ) -> IssuedInvite:
        """Create an invite on a channel.

        Args:
            channel_id: Channel the invite lands on
            max_uses: Maximum uses (0 = unlimited)
            max_age: Lifetime in seconds (0 = never expires)
            reason: Audit log reason

        Returns:
            The created invite
        """
        raise NotImplementedError

    async def create_category(
        self, name: str, grants: list[PermissionGrant]
    ) -> ChannelId:
        """Create a category carrying the given permission overwrites."""
        raise NotImplementedError

    async def create_text_channel(self, name: str, category_id: ChannelId) -> ChannelId:
        """Create a text channel inheriting its category's overwrites."""
        raise NotImplementedError

    async def send_message(self, channel_id: ChannelId, content: str) -> MessageId:
        """Send a plain message to a channel."""
        raise NotImplementedError

    async def post_invite_prompt(self, channel_id: ChannelId, content: str) -> MessageId:
        """Post the staff message carrying the "generate invite" button."""
        raise NotImplementedError
