"""OAuth login use case."""

import logfire
from pydantic import BaseModel

from stampcard.application.usecase.base import BaseUseCase
from stampcard.application.usecase.identity.signup_local import SessionResponse
from stampcard.domain.service import AuthService, IdentityService, JWTService
from stampcard.domain.value import AuthProvider


class OAuthLoginRequest(BaseModel):
    """OAuth login request.

    These parameters come from the OAuth provider in the callback URL.
    """

    provider: AuthProvider
    code: str  # OAuth authorization code
    state: str  # State parameter, already matched against the state cookie


class OAuthLoginUseCase(BaseUseCase):
    """Use case for login through an external OAuth provider."""

    def __init__(
        self,
        auth_service: AuthService,
        identity_service: IdentityService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize OAuth login use case.

        Args:
            auth_service: Authentication domain service (handles all providers)
            identity_service: Identity and profile domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.identity_service = identity_service
        self.jwt_service = jwt_service

    async def execute(self, request: OAuthLoginRequest) -> SessionResponse:
        """Execute OAuth login flow.

        Steps:
        1. Complete OAuth flow with the provider and get account info
        2. Resolve the identity, creating user and profile on first login
        3. Generate JWT token

        Args:
            request: Login request with OAuth callback parameters

        Returns:
            User ID and session token

        Raises:
            BadRequestError: If the provider is not configured
            ProviderError: If the provider rejects the exchange
        """
        provider_info = await self.auth_service.complete_login(
            request.provider, request.code, request.state
        )

        logfire.info(
            "OAuth completed",
            provider=provider_info.provider.value,
            provider_key=provider_info.provider_key,
        )

        user_id = await self.identity_service.resolve_or_create_oauth(
            provider_info.provider,
            provider_info.provider_key,
            provider_info.display_name,
            provider_info.email,
        )
        return SessionResponse(
            user_id=user_id, token=self.jwt_service.create_token(user_id)
        )
