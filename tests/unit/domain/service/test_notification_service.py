"""Unit tests for NotificationService."""

import pytest

from onboard.adapter.webhook import DisabledWebhookNotifier, MockWebhookNotifier
from onboard.domain.service import NotificationService
from tests.conftest import make_member


class TestBuildPayload:
    """Tests for build_payload."""

    def test_payload_shape(self):
        """Payload carries the fields the automation expects."""
        service = NotificationService(MockWebhookNotifier(), business_name="Nomads")

        payload = service.build_payload(make_member(), "Maria", "Maria - Nomads")

        assert payload == {
            "firstname": "Maria",
            "businessName": "Nomads",
            "discordId": "555",
            "discordTag": "maria_g",
            "categoryName": "Maria - Nomads",
            "joinedAt": "2024-05-01T12:00:00+00:00",
        }

    def test_tag_falls_back_to_username(self):
        """Without a tag the username is sent."""
        service = NotificationService(MockWebhookNotifier(), business_name="Nomads")

        payload = service.build_payload(
            make_member(tag=None, username="jdoe"), "Jo", "Jo - Nomads"
        )

        assert payload["discordTag"] == "jdoe"


class TestNotifyOnboarded:
    """Tests for notify_onboarded."""

    @pytest.mark.asyncio
    async def test_sends_payload(self):
        """The notifier receives exactly one payload."""
        notifier = MockWebhookNotifier()
        service = NotificationService(notifier, business_name="Nomads")

        notified = await service.notify_onboarded(make_member(), "Maria", "Maria - Nomads")

        assert notified is True
        assert len(notifier.payloads) == 1
        assert notifier.payloads[0]["firstname"] == "Maria"

    @pytest.mark.asyncio
    async def test_failure_is_swallowed(self):
        """A failing webhook is logged, never raised."""
        service = NotificationService(
            MockWebhookNotifier(fail=True), business_name="Nomads"
        )

        notified = await service.notify_onboarded(make_member(), "Maria", "Maria - Nomads")

        assert notified is False

    @pytest.mark.asyncio
    async def test_disabled_notifier_skips(self):
        """No webhook configured means nothing is sent."""
        service = NotificationService(DisabledWebhookNotifier(), business_name="Nomads")

        notified = await service.notify_onboarded(make_member(), "Maria", "Maria - Nomads")

        assert notified is False
