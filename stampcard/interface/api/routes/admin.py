"""Admin grant routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request

from stampcard.application.usecase.admin import AdminGrantUseCase
from stampcard.application.usecase.admin.admin_grant import (
    AdminGrantRequest,
    AdminGrantResponse,
)
from stampcard.application.usecase.base import CamelModel
from stampcard.config import AdminSettings

router = APIRouter(prefix="/api/admin", tags=["admin"], route_class=DishkaRoute)


class AdminStampAPIRequest(CamelModel):
    """API request for granting a stamp."""

    user_id: str | None = None


@router.post("/stamp", response_model=AdminGrantResponse)
async def grant_stamp(
    request: Request,
    body: AdminStampAPIRequest,
    admin_settings: FromDishka[AdminSettings],
    admin_grant_use_case: FromDishka[AdminGrantUseCase],
) -> AdminGrantResponse:
    """Grant one stamp to a user.

    The admin token travels in the ``x-admin-token`` header.

    Example:
        POST /api/admin/stamp
        x-admin-token: <token>
        {"userId": "alice"}

        Response:
        {"id": "alice", "stamps": 6}
    """
    return await admin_grant_use_case.execute(
        AdminGrantRequest(
            token=request.headers.get(admin_settings.token_header),
            user_id=body.user_id,
        )
    )
