"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class PlatformError(AdapterError):
    """Chat platform (Discord) call failed."""

    pass


class PlatformPermissionError(PlatformError):
    """The bot lacks a permission required for the call."""

    pass


class NotificationError(AdapterError):
    """External notification webhook call failed."""

    pass
