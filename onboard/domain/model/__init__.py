"""Domain model entities for client onboarding."""

from onboard.domain.model.invite import InviteRegistryEntry, InviteUsage, IssuedInvite
from onboard.domain.model.member import JoinedMember
from onboard.domain.model.workspace import (
    ClientWorkspace,
    PermissionGrant,
    WorkspacePlan,
)

__all__ = [
    "InviteRegistryEntry",
    "InviteUsage",
    "IssuedInvite",
    "JoinedMember",
    "ClientWorkspace",
    "PermissionGrant",
    "WorkspacePlan",
]
