"""Update profile use case."""

from pydantic import BaseModel, Field

from stampcard.application.usecase.base import BaseUseCase
from stampcard.application.usecase.identity.get_profile import ProfileInfo
from stampcard.domain.service import IdentityService
from stampcard.domain.value import UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    user_id: str  # From resolved caller
    username: str
    description: str | None = Field(default=None, max_length=2000)
    job: str | None = Field(default=None, max_length=255)
    hobbies: str | None = Field(default=None, max_length=1000)
    mail_address: str | None = None  # Echoed back by the edit form; must not change


class UpdateProfileUseCase(BaseUseCase):
    """Use case for editing the caller's profile.

    Username, description, job and hobbies can change; the mail address
    cannot.
    """

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize update profile use case.

        Args:
            identity_service: Identity and profile domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileInfo:
        """Execute update profile flow.

        Args:
            request: Request with the caller's user ID and new values

        Returns:
            Updated profile

        Raises:
            ValidationError: If the username is empty
            NotFoundError: If the user has no profile
            MailImmutableError: If a different mail address is supplied
        """
        profile = await self.identity_service.update_profile(
            UserId(request.user_id),
            request.username,
            description=request.description,
            job=request.job,
            hobbies=request.hobbies,
            mail_address=request.mail_address,
        )
        return ProfileInfo.from_profile(profile)
