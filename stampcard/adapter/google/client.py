"""Google OAuth 2.0 client implementation.

Implements the authorization code flow against Google's OpenID Connect
endpoints. The ``state`` parameter is checked by the HTTP layer.
"""

from urllib.parse import urlencode

import httpx
import logfire

from stampcard.adapter.error import GoogleOAuthError
from stampcard.domain.service.auth_service import OAuthClient
from stampcard.domain.value.types import AuthProvider, OAuthProviderInfo


class GoogleOAuthClient(OAuthClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 client."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: Callback URL registered with Google
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

        self.authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
        self.token_url = "https://oauth2.googleapis.com/token"
        self.user_info_url = "https://openidconnect.googleapis.com/v1/userinfo"

    async def initiate_authorization(self, state: str) -> str:
        """Build the Google consent screen URL.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": "openid email profile",
            "state": state,
            "prompt": "select_account",
        }

        auth_url = f"{self.authorize_url}?{urlencode(params)}"

        logfire.info(
            "Google OAuth authorization initiated",
            state=state,
            redirect_uri=self.redirect_uri,
        )

        return auth_url

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Exchange the callback code and fetch the account's OpenID claims.

        Args:
            code: Authorization code from Google callback
            state: State parameter (already verified by the caller)

        Returns:
            Subject id, display name and mail of the Google account

        Raises:
            GoogleOAuthError: If OAuth flow fails
        """
        access_token = await self._exchange_code_for_token(code)
        user_info = await self._get_user_info(access_token)

        subject = user_info.get("sub")
        if not subject:
            raise GoogleOAuthError("Google user info did not include a subject id")

        logfire.info("Google OAuth completed", subject=subject, state=state)

        return OAuthProviderInfo(
            provider=AuthProvider.GOOGLE,
            provider_key=subject,
            display_name=user_info.get("name"),
            email=user_info.get("email"),
        )

    async def _exchange_code_for_token(self, code: str) -> str:
        """Exchange authorization code for access token.

        Args:
            code: Authorization code from callback

        Returns:
            Access token

        Raises:
            GoogleOAuthError: If token exchange fails
        """
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                    timeout=30.0,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google token exchange failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"Token exchange failed: {response.status_code}"
                    )

                return response.json()["access_token"]

        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error during token exchange: {e}") from e

    async def _get_user_info(self, access_token: str) -> dict:
        """Get OpenID claims of the authenticated account.

        Args:
            access_token: OAuth access token

        Returns:
            Claims dictionary (``sub``, ``name``, ``email``, ...)

        Raises:
            GoogleOAuthError: If API request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                    timeout=30.0,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google user info request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"User info request failed: {response.status_code}"
                    )

                return response.json()

        except httpx.HTTPError as e:
            logfire.error("Google user info HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching user info: {e}") from e


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing.

    Returns deterministic test data without making real API calls.
    """

    def __init__(
        self,
        subject: str = "mockgoogle123",
        display_name: str | None = "Mock Google User",
        email: str | None = "mock@gmail.com",
    ) -> None:
        self.subject = subject
        self.display_name = display_name
        self.email = email

    async def initiate_authorization(self, state: str) -> str:
        """Return mock authorization URL."""
        return f"https://accounts.google.com/o/oauth2/v2/auth?state={state}&mock=true"

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Return mock account information."""
        return OAuthProviderInfo(
            provider=AuthProvider.GOOGLE,
            provider_key=self.subject,
            display_name=self.display_name,
            email=self.email,
        )
