"""Discord chat platform adapter."""

from .platform import DiscordChatPlatform, MockChatPlatform, translate_errors

__all__ = ["DiscordChatPlatform", "MockChatPlatform", "translate_errors"]
