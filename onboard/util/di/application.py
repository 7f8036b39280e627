"""Application layer DI providers."""

from dishka import Scope, provide

from onboard.application.usecase.invite import (
    IssueInviteUseCase,
    MapInviteUseCase,
    PostInviteButtonUseCase,
)
from onboard.application.usecase.onboarding import (
    OnboardMemberUseCase,
    SyncInviteUsageUseCase,
)
from onboard.config import Settings
from onboard.domain.service import (
    ChatPlatform,
    InviteAttributionService,
    InviteRegistryService,
    NamingService,
    NotificationService,
    StaffAuthorizationService,
    WorkspaceService,
)
from onboard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Invite use cases
    @provide(scope=Scope.REQUEST)
    def get_issue_invite_use_case(
        self,
        platform: ChatPlatform,
        authorization_service: StaffAuthorizationService,
        registry_service: InviteRegistryService,
        attribution_service: InviteAttributionService,
        settings: Settings,
    ) -> IssueInviteUseCase:
        """Provide issue invite use case."""
        return IssueInviteUseCase(
            platform=platform,
            authorization_service=authorization_service,
            registry_service=registry_service,
            attribution_service=attribution_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_map_invite_use_case(
        self, registry_service: InviteRegistryService
    ) -> MapInviteUseCase:
        """Provide map invite use case."""
        return MapInviteUseCase(registry_service=registry_service)

    @provide(scope=Scope.REQUEST)
    def get_post_invite_button_use_case(
        self, platform: ChatPlatform, settings: Settings
    ) -> PostInviteButtonUseCase:
        """Provide post invite button use case."""
        return PostInviteButtonUseCase(platform=platform, settings=settings)

    # Onboarding use cases
    @provide(scope=Scope.REQUEST)
    def get_onboard_member_use_case(
        self,
        platform: ChatPlatform,
        attribution_service: InviteAttributionService,
        registry_service: InviteRegistryService,
        naming_service: NamingService,
        workspace_service: WorkspaceService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> OnboardMemberUseCase:
        """Provide onboard member use case."""
        return OnboardMemberUseCase(
            platform=platform,
            attribution_service=attribution_service,
            registry_service=registry_service,
            naming_service=naming_service,
            workspace_service=workspace_service,
            notification_service=notification_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_sync_invite_usage_use_case(
        self, platform: ChatPlatform, attribution_service: InviteAttributionService
    ) -> SyncInviteUsageUseCase:
        """Provide sync invite usage use case."""
        return SyncInviteUsageUseCase(
            platform=platform, attribution_service=attribution_service
        )
