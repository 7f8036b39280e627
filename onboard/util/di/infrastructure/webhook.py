"""Webhook infrastructure providers."""

import logfire
from dishka import Scope, provide

from onboard.adapter.webhook import DisabledWebhookNotifier, HttpxWebhookNotifier
from onboard.config import Settings
from onboard.domain.service import Notifier
from onboard.util.di.base import ProviderBase


class WebhookProvider(ProviderBase):
    """Webhook component base."""

    __mock_component__ = "webhook"


class ProdWebhookProvider(WebhookProvider):
    """Production webhook provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notifier(self, settings: Settings) -> Notifier:
        """Provide onboarding webhook notifier.

        Returns:
            httpx notifier, or a disabled one if ZAPIER_WEBHOOK_URL is unset
        """
        if not settings.zapier_webhook_url:
            logfire.info("Onboarding webhook not configured")
            return DisabledWebhookNotifier()

        return HttpxWebhookNotifier(url=settings.zapier_webhook_url)
