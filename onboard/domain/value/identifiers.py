"""Strongly typed Discord identifiers.

Discord snowflakes are plain integers; NewType keeps guild, channel, role
and user ids from being mixed up in signatures.
"""

from typing import NewType

GuildId = NewType("GuildId", int)
ChannelId = NewType("ChannelId", int)
RoleId = NewType("RoleId", int)
UserId = NewType("UserId", int)
MessageId = NewType("MessageId", int)

# Opaque invite code issued by Discord (the part after discord.gg/)
InviteCode = NewType("InviteCode", str)
