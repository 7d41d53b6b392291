"""Stamp card routes: status polling and self reset."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, Request, Response, status

from stampcard.application.usecase.base import CamelModel
from stampcard.application.usecase.ledger import (
    GetStampStatusUseCase,
    ResetStampsUseCase,
)
from stampcard.application.usecase.ledger.get_stamp_status import (
    GetStampStatusRequest,
    StampStatusResponse,
)
from stampcard.application.usecase.ledger.reset_stamps import (
    ResetStampsRequest,
    ResetStampsResponse,
)
from stampcard.interface.api.caller import CallerResolver

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stamps"], route_class=DishkaRoute)


class ResetAPIRequest(CamelModel):
    """API request for resetting the caller's card."""

    user_id: str | None = None


def _status_request(
    user_id: str, previous: int | None, shown: list[int]
) -> GetStampStatusRequest:
    return GetStampStatusRequest(
        user_id=user_id, previous_stamps=previous, shown_milestones=shown
    )


@router.get("/user", response_model=StampStatusResponse)
async def show_card(
    request: Request,
    response: Response,
    caller_resolver: FromDishka[CallerResolver],
    get_stamp_status_use_case: FromDishka[GetStampStatusUseCase],
    user: str | None = None,
) -> StampStatusResponse:
    """Show the card of the selected user.

    In cookie mode, ``?user=<id>`` switches the identity cookie to that user
    and a visitor without a cookie is locked to the guest user. In session
    mode, the signed-in caller's card is shown.

    Raises:
        HTTPException: 401 if the caller cannot be identified
    """
    user_id = caller_resolver.select(request, response, user)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User is not identified.",
        )

    logger.info(f"Showing card for user {user_id}")
    return await get_stamp_status_use_case.execute(_status_request(user_id, None, []))


@router.get("/api/user/{user_id}", response_model=StampStatusResponse)
async def get_status(
    user_id: str,
    get_stamp_status_use_case: FromDishka[GetStampStatusUseCase],
    previous: int | None = Query(default=None, ge=0),
    shown: list[int] = Query(default=[]),
) -> StampStatusResponse:
    """Get the status of a card, creating the user on first sight.

    Polled by the card page. ``previous`` is the count the client displayed
    last and ``shown`` the milestones it already celebrated; the response
    lists newly crossed milestones in ``newMilestones``.

    Example:
        GET /api/user/alice?previous=4&shown=5

        Response:
        {
            "id": "alice",
            "stamps": 5,
            "isAdmin": false,
            "lastUpdatedAt": "2025-01-15T12:34:56Z",
            "recentEvents": [
                {"id": 9, "eventType": "ADD", "reason": "admin_grant", "createdAt": "..."}
            ],
            "profile": null,
            "newMilestones": []
        }
    """
    return await get_stamp_status_use_case.execute(
        _status_request(user_id, previous, shown)
    )


@router.get("/api/me", response_model=StampStatusResponse)
async def get_my_status(
    request: Request,
    caller_resolver: FromDishka[CallerResolver],
    get_stamp_status_use_case: FromDishka[GetStampStatusUseCase],
    previous: int | None = Query(default=None, ge=0),
    shown: list[int] = Query(default=[]),
) -> StampStatusResponse:
    """Get the status of the caller's own card.

    Raises:
        HTTPException: 401 if the caller cannot be identified
    """
    user_id = caller_resolver.resolve(request)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User is not identified.",
        )

    return await get_stamp_status_use_case.execute(
        _status_request(user_id, previous, shown)
    )


@router.post("/api/reset", response_model=ResetStampsResponse)
async def reset_my_stamps(
    request: Request,
    caller_resolver: FromDishka[CallerResolver],
    reset_stamps_use_case: FromDishka[ResetStampsUseCase],
    body: ResetAPIRequest | None = None,
) -> ResetStampsResponse:
    """Reset the caller's card to zero.

    A ``userId`` in the body must name the caller; resetting someone else's
    card is refused.

    Raises:
        HTTPException: 401 if the caller cannot be identified,
            403 if the body names another user
    """
    user_id = caller_resolver.resolve(request)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User is not identified.",
        )

    if body and body.user_id and body.user_id != user_id:
        logger.warning(f"Reset refused: caller {user_id} named {body.user_id}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="User mismatch."
        )

    return await reset_stamps_use_case.execute(ResetStampsRequest(user_id=user_id))
