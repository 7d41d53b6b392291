"""Domain layer DI providers."""

from dishka import Scope, provide

from stampcard.config import AdminSettings, AuthSettings
from stampcard.domain.repository import (
    AuthIdentityRepository,
    ProfileRepository,
    StampRepository,
    UserRepository,
)
from stampcard.domain.service import (
    AdminGrantService,
    AuthService,
    IdentityService,
    JWTService,
    LedgerService,
    OAuthClient,
    StatusService,
)
from stampcard.domain.value import AuthProvider
from stampcard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, oauth_clients: dict[AuthProvider, OAuthClient]
    ) -> AuthService:
        """Provide multi-provider authentication domain service.

        Args:
            oauth_clients: Dictionary mapping configured providers to their OAuth clients

        Returns:
            AuthService configured with all available OAuth clients
        """
        return AuthService(oauth_clients=oauth_clients)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_ledger_service(
        self, user_repository: UserRepository, stamp_repository: StampRepository
    ) -> LedgerService:
        """Provide stamp ledger domain service."""
        return LedgerService(
            user_repository=user_repository, stamp_repository=stamp_repository
        )

    @provide
    def get_identity_service(
        self,
        auth_identity_repository: AuthIdentityRepository,
        profile_repository: ProfileRepository,
    ) -> IdentityService:
        """Provide identity and profile domain service."""
        return IdentityService(
            auth_identity_repository=auth_identity_repository,
            profile_repository=profile_repository,
        )

    @provide
    def get_status_service(
        self, stamp_repository: StampRepository, profile_repository: ProfileRepository
    ) -> StatusService:
        """Provide status projection domain service."""
        return StatusService(
            stamp_repository=stamp_repository, profile_repository=profile_repository
        )

    @provide
    def get_admin_grant_service(
        self, ledger_service: LedgerService, admin_settings: AdminSettings
    ) -> AdminGrantService:
        """Provide admin grant domain service."""
        return AdminGrantService(
            ledger_service=ledger_service, admin_settings=admin_settings
        )
