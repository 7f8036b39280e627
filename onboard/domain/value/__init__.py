"""Domain value objects for client onboarding."""

from onboard.domain.value.identifiers import (
    ChannelId,
    GuildId,
    InviteCode,
    MessageId,
    RoleId,
    UserId,
)
from onboard.domain.value.types import Firstname, Permission, PrincipalType

__all__ = [
    # Identifiers
    "GuildId",
    "ChannelId",
    "RoleId",
    "UserId",
    "MessageId",
    "InviteCode",
    # Types
    "Firstname",
    "Permission",
    "PrincipalType",
]
