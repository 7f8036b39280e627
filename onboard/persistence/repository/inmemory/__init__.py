"""In-memory repository implementations.

These are the production stores: onboarding state is memory-only.
"""

from .invite_registry import InMemoryInviteRegistry
from .invite_usage import InMemoryInviteUsageCache

__all__ = [
    "InMemoryInviteRegistry",
    "InMemoryInviteUsageCache",
]
