"""Domain layer DI providers."""

from dishka import Scope, provide

from onboard.config import Settings
from onboard.domain.repository import InviteRegistry, InviteUsageCache
from onboard.domain.service import (
    InviteAttributionService,
    InviteRegistryService,
    NamingService,
    NotificationService,
    Notifier,
    StaffAuthorizationService,
    WorkspaceService,
)
from onboard.domain.value import ChannelId, RoleId, UserId
from onboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Services are REQUEST-scoped; the state they work on lives in the
    APP-scoped repositories.
    """

    scope = Scope.REQUEST

    @provide
    def get_naming_service(self, settings: Settings) -> NamingService:
        """Provide naming domain service."""
        return NamingService(
            business_name=settings.business_name,
            channel_emoji=settings.channel_emoji,
        )

    @provide
    def get_authorization_service(
        self, settings: Settings
    ) -> StaffAuthorizationService:
        """Provide staff authorization domain service."""
        return StaffAuthorizationService(
            staff_role_ids=[RoleId(role_id) for role_id in settings.staff_role_ids]
        )

    @provide
    def get_registry_service(
        self, invite_registry: InviteRegistry
    ) -> InviteRegistryService:
        """Provide invite registry domain service."""
        return InviteRegistryService(invite_registry=invite_registry)

    @provide
    def get_attribution_service(
        self, usage_cache: InviteUsageCache, invite_registry: InviteRegistry
    ) -> InviteAttributionService:
        """Provide invite attribution domain service."""
        return InviteAttributionService(
            usage_cache=usage_cache, invite_registry=invite_registry
        )

    @provide
    def get_workspace_service(
        self, naming_service: NamingService, settings: Settings
    ) -> WorkspaceService:
        """Provide workspace planning domain service."""
        founder_user_ids = (
            [UserId(settings.founder_user_id)] if settings.founder_user_id else []
        )
        return WorkspaceService(
            naming_service=naming_service,
            staff_role_ids=[RoleId(role_id) for role_id in settings.staff_role_ids],
            founder_user_ids=founder_user_ids,
            csm_user_ids=[UserId(user_id) for user_id in settings.csm_user_ids],
            operations_user_id=(
                UserId(settings.operations_user_id)
                if settings.operations_user_id
                else None
            ),
            start_here_channel_id=(
                ChannelId(settings.start_here_channel_id)
                if settings.start_here_channel_id
                else None
            ),
        )

    @provide
    def get_notification_service(
        self, notifier: Notifier, settings: Settings
    ) -> NotificationService:
        """Provide onboarding notification domain service."""
        return NotificationService(
            notifier=notifier, business_name=settings.business_name
        )
