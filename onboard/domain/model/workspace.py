"""Client workspace entities.

A workspace is one private category holding exactly one text channel.
``WorkspacePlan`` describes what should be created; ``ClientWorkspace``
records what was created.
"""

from pydantic import Field

from onboard.domain.model.common import DomainModel
from onboard.domain.value import (
    ChannelId,
    MessageId,
    Permission,
    PrincipalType,
    UserId,
)


class PermissionGrant(DomainModel):
    """Permission overwrite for one role or member."""

    principal_id: int
    principal_type: PrincipalType
    allow: frozenset[Permission] = frozenset()
    deny: frozenset[Permission] = frozenset()


class WorkspacePlan(DomainModel):
    """Side effects to perform for one onboarded member."""

    member_id: UserId
    firstname: str
    category_name: str
    channel_name: str
    grants: list[PermissionGrant] = Field(default_factory=list)
    welcome_message: str


class ClientWorkspace(DomainModel):
    """Provisioned category + channel for one client."""

    category_id: ChannelId
    channel_id: ChannelId
    category_name: str
    channel_name: str
    message_id: MessageId | None = None
