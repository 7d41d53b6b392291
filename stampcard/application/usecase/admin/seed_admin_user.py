"""Seed admin user use case."""

from pydantic import BaseModel

from stampcard.application.usecase.base import BaseUseCase
from stampcard.config import AdminSettings
from stampcard.domain.service import LedgerService
from stampcard.domain.value import UserId


class SeedAdminUserResponse(BaseModel):
    """Seed admin user response."""

    user_id: str
    is_admin: bool


class SeedAdminUserUseCase(BaseUseCase):
    """Use case for creating the configured admin user at startup.

    Runs before the service accepts requests; an existing row is kept as is.
    """

    def __init__(
        self, ledger_service: LedgerService, admin_settings: AdminSettings
    ) -> None:
        self.ledger_service = ledger_service
        self.admin_settings = admin_settings

    async def execute(self, request: None = None) -> SeedAdminUserResponse:
        """Insert the admin user if absent."""
        user = await self.ledger_service.ensure_admin_user(
            UserId(self.admin_settings.user_id)
        )
        return SeedAdminUserResponse(user_id=user.id, is_admin=user.is_admin)
