"""Onboarding use cases."""

from onboard.application.usecase.onboarding.onboard_member import (
    OnboardMemberRequest,
    OnboardMemberResponse,
    OnboardMemberUseCase,
    OnboardStatus,
)
from onboard.application.usecase.onboarding.sync_invite_usage import (
    SyncInviteUsageResponse,
    SyncInviteUsageUseCase,
)

__all__ = [
    "OnboardMemberRequest",
    "OnboardMemberResponse",
    "OnboardMemberUseCase",
    "OnboardStatus",
    "SyncInviteUsageResponse",
    "SyncInviteUsageUseCase",
]
