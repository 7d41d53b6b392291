"""Authentication domain service."""

from stampcard.domain.error import BadRequestError
from stampcard.domain.value import AuthProvider, OAuthProviderInfo

from .base import Service


class OAuthClient:
    """Generic OAuth client interface for all providers."""

    async def initiate_authorization(self, state: str) -> str:
        """Initiate OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Complete OAuth authorization flow.

        Args:
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            Provider user information
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for OAuth login across configured providers.

    Providers without credentials are absent from ``oauth_clients``.
    """

    def __init__(self, oauth_clients: dict[AuthProvider, OAuthClient]) -> None:
        """Initialize auth service.

        Args:
            oauth_clients: Map of provider to OAuth client implementation
        """
        self.oauth_clients = oauth_clients

    def is_available(self, provider: AuthProvider) -> bool:
        """Whether login through ``provider`` is configured."""
        return provider in self.oauth_clients

    async def initiate_login(self, provider: AuthProvider, state: str) -> str:
        """Initiate OAuth login flow.

        Args:
            provider: Authentication provider to use
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to

        Raises:
            BadRequestError: If the provider is not configured
        """
        return await self._client(provider).initiate_authorization(state)

    async def complete_login(
        self, provider: AuthProvider, code: str, state: str
    ) -> OAuthProviderInfo:
        """Complete OAuth login flow.

        Args:
            provider: Authentication provider used
            code: Authorization code from OAuth callback
            state: State parameter for verification

        Returns:
            User information from the provider

        Raises:
            BadRequestError: If the provider is not configured
        """
        return await self._client(provider).complete_authorization(code, state)

    def _client(self, provider: AuthProvider) -> OAuthClient:
        client = self.oauth_clients.get(provider)
        if not client:
            raise BadRequestError(f"Unsupported provider: {provider.value}")
        return client
