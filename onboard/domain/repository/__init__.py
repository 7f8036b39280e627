"""Repository interfaces for the onboarding domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from onboard.domain.repository.invite_registry import InviteRegistry
from onboard.domain.repository.invite_usage import InviteUsageCache

__all__ = [
    "InviteRegistry",
    "InviteUsageCache",
]
