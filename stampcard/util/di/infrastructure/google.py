"""Google infrastructure providers."""

from dishka import Scope, provide

from stampcard.adapter.google.client import GoogleOAuthClient, RealGoogleOAuthClient
from stampcard.config import Settings
from stampcard.util.di.base import ProviderBase


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self, settings: Settings) -> GoogleOAuthClient | None:
        """Provide Google OAuth client.

        Returns:
            Google OAuth 2.0 client, or None when credentials are not configured
        """
        google = settings.auth.google
        if not google.enabled:
            return None

        return RealGoogleOAuthClient(
            client_id=google.client_id or "",
            client_secret=google.client_secret or "",
            redirect_uri=settings.auth.google_callback_url,
        )
