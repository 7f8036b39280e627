"""Domain services."""

from .attribution_service import InviteAttributionService
from .authorization_service import StaffAuthorizationService
from .base import Service
from .naming_service import NamingService, slugify
from .notification_service import NotificationService, Notifier
from .platform import ChatPlatform
from .registry_service import InviteRegistryService
from .workspace_service import WorkspaceService

__all__ = [
    "ChatPlatform",
    "InviteAttributionService",
    "InviteRegistryService",
    "NamingService",
    "NotificationService",
    "Notifier",
    "Service",
    "StaffAuthorizationService",
    "WorkspaceService",
    "slugify",
]
