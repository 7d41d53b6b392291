"""Get profile use case."""

from datetime import datetime

from pydantic import BaseModel

from stampcard.application.usecase.base import BaseUseCase, CamelModel
from stampcard.domain.error import NotFoundError
from stampcard.domain.model import Profile
from stampcard.domain.service import IdentityService
from stampcard.domain.value import AuthProvider, UserId


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str  # From resolved caller


class ProfileInfo(CamelModel):
    """Profile information for responses."""

    username: str
    mail_address: str | None
    description: str
    job: str
    hobbies: str
    updated_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileInfo":
        return cls(
            username=profile.username,
            mail_address=profile.mail_address.root if profile.mail_address else None,
            description=profile.description,
            job=profile.job,
            hobbies=profile.hobbies,
            updated_at=profile.updated_at,
        )


class IdentityInfo(CamelModel):
    """Linked login identity."""

    provider: AuthProvider
    created_at: datetime


class GetProfileResponse(CamelModel):
    """Get profile response."""

    user_id: str
    profile: ProfileInfo
    identities: list[IdentityInfo]


class GetProfileUseCase(BaseUseCase):
    """Use case for reading the caller's profile and linked identities."""

    def __init__(self, identity_service: IdentityService) -> None:
        """Initialize get profile use case.

        Args:
            identity_service: Identity and profile domain service
        """
        self.identity_service = identity_service

    async def execute(self, request: GetProfileRequest) -> GetProfileResponse:
        """Execute get profile flow.

        Args:
            request: Request with the caller's user ID

        Returns:
            Profile and identities of the user

        Raises:
            NotFoundError: If the user has no profile
        """
        user_id = UserId(request.user_id)
        profile = await self.identity_service.get_profile(user_id)
        if profile is None:
            raise NotFoundError("Profile", user_id)

        identities = await self.identity_service.get_identities(user_id)

        return GetProfileResponse(
            user_id=user_id,
            profile=ProfileInfo.from_profile(profile),
            identities=[
                IdentityInfo(provider=identity.provider, created_at=identity.created_at)
                for identity in identities
            ],
        )
