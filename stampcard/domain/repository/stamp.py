"""Stamp ledger repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from stampcard.domain.model.snapshot import StampSnapshot
from stampcard.domain.model.stamp_event import StampEvent
from stampcard.domain.value import UserId


class StampRepository(ABC):
    """Repository for the stamp counter and its event history.

    Each mutating method changes the counter and appends one event as a
    single atomic unit; readers never observe one without the other.
    """

    @abstractmethod
    async def add_stamp(
        self, user_id: UserId, reason: str, created_at: datetime, max_stamps: int
    ) -> tuple[int, StampEvent]:
        """Increment the counter up to ``max_stamps`` and record an ADD event.

        Creates the user with zero stamps first if it does not exist. The
        event is appended even when the counter is already at the cap.

        Args:
            user_id: Target user
            reason: Free-text cause stored on the event
            created_at: Event timestamp
            max_stamps: Upper bound for the counter

        Returns:
            Tuple of (stored counter after the update, appended event)
        """
        pass

    @abstractmethod
    async def reset_stamps(
        self, user_id: UserId, reason: str, created_at: datetime
    ) -> StampEvent:
        """Set the counter to zero and record a RESET event.

        Creates the user first if it does not exist.

        Args:
            user_id: Target user
            reason: Free-text cause stored on the event
            created_at: Event timestamp

        Returns:
            The appended event
        """
        pass

    @abstractmethod
    async def find_recent_events(self, user_id: UserId, limit: int) -> list[StampEvent]:
        """Find a user's newest events.

        Args:
            user_id: The user's ID
            limit: Maximum number of events

        Returns:
            Events ordered by created_at descending, newest insertion first on ties
        """
        pass

    @abstractmethod
    async def find_last_event_at(self, user_id: UserId) -> Optional[datetime]:
        """Get the timestamp of the user's newest event.

        Args:
            user_id: The user's ID

        Returns:
            Max created_at of the user's events, None if there are none
        """
        pass

    @abstractmethod
    async def snapshot(self, user_id: UserId, limit: int) -> Optional[StampSnapshot]:
        """Read counter and newest events in one consistent read.

        Args:
            user_id: The user's ID
            limit: Maximum number of events

        Returns:
            Snapshot if the user exists, None otherwise
        """
        pass
