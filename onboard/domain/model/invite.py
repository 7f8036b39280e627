"""Invite entities.

Invites are issued by Discord. The bot keeps two process-lifetime views of
them: which client each staff-issued code was meant for, and how many times
each code had been used at the last refresh.
"""

from datetime import datetime

from pydantic import Field

from onboard.domain.model.common import DomainModel
from onboard.domain.value import ChannelId, Firstname, InviteCode


class InviteRegistryEntry(DomainModel):
    """Invite code mapped to the client it was issued for.

    Business rules:
    - Created by staff issuance or the external automation webhook
    - Upserted by code (last write wins)
    - Read on member join, never deleted
    """

    invite_code: InviteCode
    firstname: Firstname
    created_at: datetime = Field(default_factory=datetime.now)


class InviteUsage(DomainModel):
    """Use count of one invite as reported by Discord."""

    invite_code: InviteCode
    uses: int = Field(ge=0)


class IssuedInvite(DomainModel):
    """Invite freshly created on the platform."""

    invite_code: InviteCode
    url: str
    channel_id: ChannelId
