"""Admin grant use case."""

from pydantic import BaseModel

from stampcard.application.usecase.base import BaseUseCase, CamelModel
from stampcard.domain.service import AdminGrantService


class AdminGrantRequest(BaseModel):
    """Admin grant request."""

    token: str | None  # Value of the admin token header
    user_id: str | None  # Target user from the request body


class AdminGrantResponse(CamelModel):
    """Admin grant response."""

    id: str
    stamps: int


class AdminGrantUseCase(BaseUseCase):
    """Use case for granting one stamp to another user with the admin token."""

    def __init__(self, admin_grant_service: AdminGrantService) -> None:
        """Initialize admin grant use case.

        Args:
            admin_grant_service: Admin grant domain service
        """
        self.admin_grant_service = admin_grant_service

    async def execute(self, request: AdminGrantRequest) -> AdminGrantResponse:
        """Execute admin grant flow.

        Args:
            request: Token and target user

        Returns:
            Target user and its counter after the grant

        Raises:
            ConfigurationError: If no admin token is configured
            UnauthorizedError: If the token does not match
            BadRequestError: If the target user ID is empty or too long
        """
        stamps = await self.admin_grant_service.authorize_and_grant(
            request.token, request.user_id
        )
        return AdminGrantResponse(id=request.user_id or "", stamps=stamps)
