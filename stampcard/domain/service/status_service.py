"""Status projection domain service."""

from dataclasses import dataclass
from datetime import datetime

import logfire

from stampcard.domain.error import NotFoundError
from stampcard.domain.model import Profile, StampEvent
from stampcard.domain.repository import ProfileRepository, StampRepository
from stampcard.domain.value import RECENT_EVENT_LIMIT, UserId

from .base import Service


@dataclass
class StampStatus:
    """Read-only view of a user's card.

    Counter, last update and recent events come from one ledger snapshot.
    """

    user_id: UserId
    stamps: int
    is_admin: bool
    last_updated_at: datetime | None
    recent_events: list[StampEvent]
    profile: Profile | None


class StatusService(Service):
    """Composes ledger and profile state into a status view.

    Reads only; safe to call at polling frequency.
    """

    def __init__(
        self,
        stamp_repository: StampRepository,
        profile_repository: ProfileRepository,
    ) -> None:
        """Initialize status service.

        Args:
            stamp_repository: Stamp counter and event repository
            profile_repository: Profile repository
        """
        self.stamp_repository = stamp_repository
        self.profile_repository = profile_repository

    async def project(
        self, user_id: UserId, limit: int = RECENT_EVENT_LIMIT
    ) -> StampStatus:
        """Build the status view for a user.

        Args:
            user_id: User ID
            limit: Number of recent events to include

        Returns:
            Status view; ``profile`` is None when the user has none

        Raises:
            NotFoundError: If the user does not exist
        """
        with logfire.span("status_service.project", user_id=user_id):
            snapshot = await self.stamp_repository.snapshot(user_id, limit)
            if snapshot is None:
                logfire.warn("Status requested for unknown user", user_id=user_id)
                raise NotFoundError("User", user_id)

            profile = await self.profile_repository.find_by_user_id(user_id)

            return StampStatus(
                user_id=user_id,
                stamps=snapshot.user.stamps,
                is_admin=snapshot.user.is_admin,
                last_updated_at=snapshot.last_updated_at,
                recent_events=snapshot.recent_events,
                profile=profile,
            )
