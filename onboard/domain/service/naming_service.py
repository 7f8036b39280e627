"""Naming domain service.

Workspace names are derived from the client's firstname:

    category: "Maria - Nomads"
    channel:  "🤝│nomads-maria"
"""

import re

from .base import Service

FALLBACK_FIRSTNAME = "Client"
SLUG_MAX_LENGTH = 40
CHANNEL_NAME_MAX_LENGTH = 100  # Discord limit, categories included

_WHITESPACE_RUN = re.compile(r"\s+")
_NOT_SLUG_CHAR = re.compile(r"[^a-z0-9-]")


def slugify(value: str) -> str:
    """Make a Discord-safe channel name fragment.

    Lower-cases, trims, turns whitespace runs into a single hyphen, drops
    anything outside ``[a-z0-9-]`` and truncates to 40 characters.

    >>> slugify("Jane  O'Brien!!")
    'jane-obrien'
    """
    slug = _WHITESPACE_RUN.sub("-", value.lower().strip())
    slug = _NOT_SLUG_CHAR.sub("", slug)
    return slug[:SLUG_MAX_LENGTH]


class NamingService(Service):
    """Domain service for client naming rules."""

    def __init__(self, business_name: str, channel_emoji: str) -> None:
        """Initialize naming service.

        Args:
            business_name: Business display name appended to category names
            channel_emoji: Prefix of every client channel name
        """
        self.business_name = business_name
        self.channel_emoji = channel_emoji

    def resolve_firstname(
        self,
        registered: str | None,
        display_name: str | None,
        username: str | None,
    ) -> str:
        """Pick the first non-blank candidate, trimmed.

        Priority: registry firstname, member display name, username,
        then the literal "Client".
        """
        for candidate in (registered, display_name, username):
            if candidate and candidate.strip():
                return candidate.strip()
        return FALLBACK_FIRSTNAME

    def category_name(self, firstname: str) -> str:
        """Category name, with the firstname cut to fit Discord's limit."""
        suffix = f" - {self.business_name}"
        room = max(CHANNEL_NAME_MAX_LENGTH - len(suffix), 1)
        return f"{firstname[:room].rstrip()}{suffix}"

    def channel_name(self, firstname: str) -> str:
        return (
            f"{self.channel_emoji}│{slugify(self.business_name)}-{slugify(firstname)}"
        )
