"""Application layer DI providers."""

from dishka import Scope, provide

from stampcard.application.usecase.admin import AdminGrantUseCase, SeedAdminUserUseCase
from stampcard.application.usecase.identity import (
    GetProfileUseCase,
    LoginLocalUseCase,
    OAuthLoginUseCase,
    SignupLocalUseCase,
    UpdateProfileUseCase,
)
from stampcard.application.usecase.ledger import (
    GetStampStatusUseCase,
    ResetStampsUseCase,
)
from stampcard.config import AdminSettings
from stampcard.domain.service import (
    AdminGrantService,
    AuthService,
    IdentityService,
    JWTService,
    LedgerService,
    StatusService,
)
from stampcard.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Ledger use cases
    @provide
    def get_stamp_status_use_case(
        self, ledger_service: LedgerService, status_service: StatusService
    ) -> GetStampStatusUseCase:
        """Provide get stamp status use case."""
        return GetStampStatusUseCase(
            ledger_service=ledger_service, status_service=status_service
        )

    @provide
    def get_reset_stamps_use_case(
        self, ledger_service: LedgerService
    ) -> ResetStampsUseCase:
        """Provide reset stamps use case."""
        return ResetStampsUseCase(ledger_service=ledger_service)

    # Admin use cases
    @provide
    def get_admin_grant_use_case(
        self, admin_grant_service: AdminGrantService
    ) -> AdminGrantUseCase:
        """Provide admin grant use case."""
        return AdminGrantUseCase(admin_grant_service=admin_grant_service)

    @provide
    def get_seed_admin_user_use_case(
        self, ledger_service: LedgerService, admin_settings: AdminSettings
    ) -> SeedAdminUserUseCase:
        """Provide seed admin user use case."""
        return SeedAdminUserUseCase(
            ledger_service=ledger_service, admin_settings=admin_settings
        )

    # Identity use cases
    @provide
    def get_signup_local_use_case(
        self, identity_service: IdentityService, jwt_service: JWTService
    ) -> SignupLocalUseCase:
        """Provide local signup use case."""
        return SignupLocalUseCase(
            identity_service=identity_service, jwt_service=jwt_service
        )

    @provide
    def get_login_local_use_case(
        self, identity_service: IdentityService, jwt_service: JWTService
    ) -> LoginLocalUseCase:
        """Provide local login use case."""
        return LoginLocalUseCase(
            identity_service=identity_service, jwt_service=jwt_service
        )

    @provide
    def get_oauth_login_use_case(
        self,
        auth_service: AuthService,
        identity_service: IdentityService,
        jwt_service: JWTService,
    ) -> OAuthLoginUseCase:
        """Provide OAuth login use case."""
        return OAuthLoginUseCase(
            auth_service=auth_service,
            identity_service=identity_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_profile_use_case(
        self, identity_service: IdentityService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(identity_service=identity_service)

    @provide
    def get_update_profile_use_case(
        self, identity_service: IdentityService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(identity_service=identity_service)
