"""Outbound webhook adapter."""

from .client import (
    DisabledWebhookNotifier,
    HttpxWebhookNotifier,
    MockWebhookNotifier,
    WebhookNotifier,
)

__all__ = [
    "WebhookNotifier",
    "HttpxWebhookNotifier",
    "DisabledWebhookNotifier",
    "MockWebhookNotifier",
]
