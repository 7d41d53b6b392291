"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class GoogleOAuthError(ProviderError):
    """Google OAuth flow failed."""

    pass
