"""OAuth infrastructure provider for multi-provider authentication."""

from dishka import Scope, provide

from stampcard.adapter.google.client import GoogleOAuthClient
from stampcard.domain.service.auth_service import OAuthClient
from stampcard.domain.value import AuthProvider
from stampcard.util.di.base import ProviderBase


class OAuthAggregatorProvider(ProviderBase):
    """Provider that aggregates all configured OAuth clients into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_oauth_clients(
        self,
        google_oauth_client: GoogleOAuthClient | None,
    ) -> dict[AuthProvider, OAuthClient]:
        """Provide dictionary of configured OAuth clients by provider.

        Args:
            google_oauth_client: Google OAuth client, None when not configured

        Returns:
            Dictionary mapping AuthProvider to OAuthClient
        """
        clients: dict[AuthProvider, OAuthClient] = {}
        if google_oauth_client is not None:
            clients[AuthProvider.GOOGLE] = google_oauth_client
        return clients
