"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error.

    Raised at startup when a required environment variable is missing or
    invalid. This is the only error that is allowed to stop the process.
    """

    pass
