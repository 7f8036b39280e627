"""Onboarding notification domain service."""

from typing import Any

import logfire

from onboard.domain.model.member import JoinedMember

from .base import Service


class Notifier:
    """Outbound notification interface (external automation webhook)."""

    # False for the stand-in used when no webhook URL is configured
    enabled: bool = True

    async def notify(self, payload: dict[str, Any]) -> None:
        """Deliver a JSON payload.

        Raises:
            NotificationError: If delivery failed
        """
        raise NotImplementedError


class NotificationService(Service):
    """Best-effort "client onboarded" notification.

    Failures are logged and swallowed: a broken webhook must never undo or
    interrupt onboarding.
    """

    def __init__(self, notifier: Notifier, business_name: str) -> None:
        """Initialize notification service.

        Args:
            notifier: Webhook notifier
            business_name: Business display name sent in every payload
        """
        self.notifier = notifier
        self.business_name = business_name

    def build_payload(
        self, member: JoinedMember, firstname: str, category_name: str
    ) -> dict[str, Any]:
        return {
            "firstname": firstname,
            "businessName": self.business_name,
            "discordId": str(member.id),
            "discordTag": member.tag or member.username or "",
            "categoryName": category_name,
            "joinedAt": member.joined_at.isoformat(),
        }

    async def notify_onboarded(
        self, member: JoinedMember, firstname: str, category_name: str
    ) -> bool:
        """Send the onboarding payload, ignoring failure.

        Returns:
            True if the notifier accepted the payload
        """
        if not self.notifier.enabled:
            return False

        payload = self.build_payload(member, firstname, category_name)
        try:
            await self.notifier.notify(payload)
        except Exception as e:
            logfire.error(
                "Onboarding notification failed",
                member_id=member.id,
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

        logfire.info("Onboarding notification sent", member_id=member.id)
        return True
