"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """A setting the request depends on is missing, e.g. ADMIN__TOKEN."""

    pass
