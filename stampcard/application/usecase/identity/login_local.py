"""Local login use case."""

from pydantic import BaseModel

from stampcard.application.usecase.base import BaseUseCase
from stampcard.application.usecase.identity.signup_local import SessionResponse
from stampcard.domain.service import IdentityService, JWTService


class LoginLocalRequest(BaseModel):
    """Local login request."""

    username: str
    mail_address: str


class LoginLocalUseCase(BaseUseCase):
    """Use case for logging in with username and mail address.

    The username is a weak second factor; there is no password.
    """

    def __init__(
        self, identity_service: IdentityService, jwt_service: JWTService
    ) -> None:
        self.identity_service = identity_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginLocalRequest) -> SessionResponse:
        """Execute local login flow.

        Raises:
            NotFoundError: If no local account exists for the mail address
            UsernameMismatchError: If the username does not match
        """
        user_id = await self.identity_service.login_local(
            request.username, request.mail_address
        )
        return SessionResponse(
            user_id=user_id, token=self.jwt_service.create_token(user_id)
        )
