"""Joined member entity."""

from datetime import datetime

from pydantic import Field

from onboard.domain.model.common import DomainModel
from onboard.domain.value import GuildId, UserId


class JoinedMember(DomainModel):
    """Member who just joined the guild.

    Only the fields the onboarding workflow reads are kept; the platform
    object itself never crosses into the domain.
    """

    id: UserId
    guild_id: GuildId
    display_name: str | None = None  # Server nickname or global display name
    username: str | None = None
    tag: str | None = None  # e.g. "jdoe" or legacy "jdoe#1234"
    joined_at: datetime = Field(default_factory=datetime.now)
