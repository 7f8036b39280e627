"""External automation webhook client.

Posts the "client onboarded" payload to a Zapier-style catch hook.
"""

from typing import Any

import httpx
import logfire

from onboard.adapter.error import NotificationError
from onboard.domain.service.notification_service import Notifier


class WebhookNotifier(Notifier):
    """Base class for webhook notifiers.

    Provides type distinction for dependency injection.
    """

    pass


class HttpxWebhookNotifier(WebhookNotifier):
    """Webhook notifier backed by httpx."""

    def __init__(self, url: str, timeout: float = 10.0) -> None:
        """Initialize webhook notifier.

        Args:
            url: Catch hook URL receiving the JSON payload
            timeout: Request timeout in seconds
        """
        self.url = url
        self.timeout = timeout

    async def notify(self, payload: dict[str, Any]) -> None:
        """POST the payload as JSON.

        Raises:
            NotificationError: If the request failed or was rejected
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.url, json=payload, timeout=self.timeout
                )
        except httpx.HTTPError as e:
            logfire.error("Webhook HTTP error", error=str(e))
            raise NotificationError(f"HTTP error posting webhook: {e}") from e

        if response.is_error:
            logfire.error(
                "Webhook rejected payload",
                status_code=response.status_code,
                error=response.text,
            )
            raise NotificationError(
                f"Webhook returned {response.status_code}"
            )


class DisabledWebhookNotifier(WebhookNotifier):
    """Stand-in used when no webhook URL is configured."""

    enabled = False

    async def notify(self, payload: dict[str, Any]) -> None:
        return None


class MockWebhookNotifier(WebhookNotifier):
    """Mock webhook notifier for testing.

    Records every payload instead of sending it. Set ``fail`` to make the
    next calls raise ``NotificationError``.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.payloads: list[dict[str, Any]] = []

    async def notify(self, payload: dict[str, Any]) -> None:
        if self.fail:
            raise NotificationError("Mock webhook failure")
        self.payloads.append(payload)
