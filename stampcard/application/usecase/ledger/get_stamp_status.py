"""Get stamp status use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from stampcard.application.usecase.base import BaseUseCase, CamelModel
from stampcard.application.usecase.identity.get_profile import ProfileInfo
from stampcard.domain.service import LedgerService, StatusService, crossed_milestones
from stampcard.domain.value import StampEventType, UserId


class GetStampStatusRequest(BaseModel):
    """Get stamp status request.

    ``previous_stamps`` and ``shown_milestones`` are the polling client's
    view; without ``previous_stamps`` no milestone is reported.
    """

    user_id: str
    previous_stamps: int | None = Field(default=None, ge=0)
    shown_milestones: list[int] = Field(default_factory=list)


class StampEventInfo(CamelModel):
    """Stamp event for responses."""

    id: int
    event_type: StampEventType
    reason: str
    created_at: datetime


class StampStatusResponse(CamelModel):
    """Stamp card status."""

    id: str
    stamps: int
    is_admin: bool
    last_updated_at: datetime | None
    recent_events: list[StampEventInfo]
    profile: ProfileInfo | None
    new_milestones: list[int]


class GetStampStatusUseCase(BaseUseCase):
    """Use case for reading a stamp card, creating the user on first sight."""

    def __init__(
        self, ledger_service: LedgerService, status_service: StatusService
    ) -> None:
        """Initialize get stamp status use case.

        Args:
            ledger_service: Ledger domain service
            status_service: Status projection domain service
        """
        self.ledger_service = ledger_service
        self.status_service = status_service

    async def execute(self, request: GetStampStatusRequest) -> StampStatusResponse:
        """Execute get stamp status flow.

        Steps:
        1. Get or create the user
        2. Project counter, events and profile from one snapshot
        3. Report milestones crossed since the client's last poll

        Args:
            request: Request with user ID and the client's last view

        Returns:
            Current status of the card

        Raises:
            BadRequestError: If the user ID is empty or too long
        """
        user_id = UserId(request.user_id)
        await self.ledger_service.get_or_create(user_id)
        status = await self.status_service.project(user_id)

        new_milestones: list[int] = []
        if request.previous_stamps is not None:
            new_milestones = crossed_milestones(
                request.previous_stamps, status.stamps, request.shown_milestones
            )

        return StampStatusResponse(
            id=status.user_id,
            stamps=status.stamps,
            is_admin=status.is_admin,
            last_updated_at=status.last_updated_at,
            recent_events=[
                StampEventInfo(
                    id=event.id,
                    event_type=event.event_type,
                    reason=event.reason,
                    created_at=event.created_at,
                )
                for event in status.recent_events
            ],
            profile=ProfileInfo.from_profile(status.profile) if status.profile else None,
            new_milestones=new_milestones,
        )
