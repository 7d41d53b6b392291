"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, status
from pydantic import Field

from stampcard.application.usecase.base import CamelModel
from stampcard.application.usecase.identity import (
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from stampcard.application.usecase.identity.get_profile import (
    GetProfileRequest,
    GetProfileResponse,
    ProfileInfo,
)
from stampcard.application.usecase.identity.update_profile import (
    UpdateProfileRequest,
)
from stampcard.domain.value import MAX_JOB_LENGTH, MAX_USERNAME_LENGTH
from stampcard.interface.api.caller import CallerResolver

router = APIRouter(prefix="/api/profile", tags=["profile"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(CamelModel):
    """API request for editing the caller's profile."""

    username: str = Field(max_length=MAX_USERNAME_LENGTH)
    description: str | None = Field(default=None, max_length=2000)
    job: str | None = Field(default=None, max_length=MAX_JOB_LENGTH)
    hobbies: str | None = Field(default=None, max_length=1000)
    mail_address: str | None = None


def _require_caller(request: Request, caller_resolver: CallerResolver) -> str:
    user_id = caller_resolver.resolve(request)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    return user_id


@router.get("", response_model=GetProfileResponse)
async def get_my_profile(
    request: Request,
    caller_resolver: FromDishka[CallerResolver],
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> GetProfileResponse:
    """Get the caller's profile and linked login identities."""
    user_id = _require_caller(request, caller_resolver)
    return await get_profile_use_case.execute(GetProfileRequest(user_id=user_id))


@router.put("", response_model=ProfileInfo)
async def update_my_profile(
    request: Request,
    body: UpdateProfileAPIRequest,
    caller_resolver: FromDishka[CallerResolver],
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
) -> ProfileInfo:
    """Edit the caller's profile.

    Omitted fields keep their value. The mail address cannot be changed;
    sending a different one is refused and nothing is saved.

    Example:
        PUT /api/profile
        {"username": "Hōnen", "job": "monk", "mailAddress": "a@b.com"}
    """
    user_id = _require_caller(request, caller_resolver)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            user_id=user_id,
            username=body.username,
            description=body.description,
            job=body.job,
            hobbies=body.hobbies,
            mail_address=body.mail_address,
        )
    )
