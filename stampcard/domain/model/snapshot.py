"""Consistent read of a user's ledger state."""

from datetime import datetime

from stampcard.domain.model.common import DomainModel
from stampcard.domain.model.stamp_event import StampEvent
from stampcard.domain.model.user import User


class StampSnapshot(DomainModel):
    """Counter and newest events of one user, read at a single point in time."""

    user: User
    recent_events: list[StampEvent]

    @property
    def last_updated_at(self) -> datetime | None:
        """Timestamp of the newest event, None before the first mutation."""
        if not self.recent_events:
            return None
        return self.recent_events[0].created_at
