"""Local signup use case."""

from pydantic import BaseModel

from stampcard.application.usecase.base import BaseUseCase, CamelModel
from stampcard.domain.service import IdentityService, JWTService


class SignupLocalRequest(BaseModel):
    """Local signup request."""

    username: str
    mail_address: str
    description: str = ""
    job: str = ""
    hobbies: str = ""


class SessionResponse(CamelModel):
    """Resolved account plus a session token for the cookie."""

    user_id: str
    token: str


class SignupLocalUseCase(BaseUseCase):
    """Use case for registering an account with username and mail address."""

    def __init__(
        self, identity_service: IdentityService, jwt_service: JWTService
    ) -> None:
        """Initialize local signup use case.

        Args:
            identity_service: Identity and profile domain service
            jwt_service: JWT token domain service
        """
        self.identity_service = identity_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupLocalRequest) -> SessionResponse:
        """Execute local signup flow.

        Args:
            request: Signup form values

        Returns:
            New user ID and session token

        Raises:
            ValidationError: If username or mail address is empty
            ConflictError: If the mail address is already registered
        """
        user_id = await self.identity_service.signup_local(
            request.username,
            request.mail_address,
            description=request.description,
            job=request.job,
            hobbies=request.hobbies,
        )
        return SessionResponse(
            user_id=user_id, token=self.jwt_service.create_token(user_id)
        )
