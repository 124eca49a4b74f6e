"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches a requested component."""

    pass
