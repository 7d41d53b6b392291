"""In-memory stamp ledger repository for testing."""

from datetime import datetime
from typing import Any, Optional

from stampcard.domain.model.snapshot import StampSnapshot
from stampcard.domain.model.stamp_event import StampEvent
from stampcard.domain.repository.stamp import StampRepository
from stampcard.domain.value import StampEventType, UserId
from stampcard.persistence.mappers import row_to_stamp_event, row_to_user
from stampcard.persistence.repository.inmemory.store import InMemoryStore


class InMemoryStampRepository(StampRepository):
    """In-memory implementation of StampRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _append_event(
        self,
        user_id: UserId,
        reason: str,
        created_at: datetime,
        event_type: StampEventType,
    ) -> StampEvent:
        row = {
            "id": self._store.next_id("stamp_events"),
            "user_id": user_id,
            "created_at": created_at,
            "reason": reason,
            "event_type": event_type.value,
        }
        self._store.stamp_events.append(row)
        return row_to_stamp_event(row)

    def _recent_rows(self, user_id: UserId, limit: int) -> list[dict[str, Any]]:
        rows = [row for row in self._store.stamp_events if row["user_id"] == user_id]
        rows.sort(key=lambda row: (row["created_at"], row["id"]), reverse=True)
        return rows[:limit]

    async def add_stamp(
        self, user_id: UserId, reason: str, created_at: datetime, max_stamps: int
    ) -> tuple[int, StampEvent]:
        """Increment the counter up to ``max_stamps`` and record an ADD event."""
        self._store.check_available("InMemoryStampRepository.add_stamp")
        row = self._store.ensure_user(user_id)
        row["stamps"] = min(row["stamps"] + 1, max_stamps)
        event = self._append_event(user_id, reason, created_at, StampEventType.ADD)
        return row["stamps"], event

    async def reset_stamps(
        self, user_id: UserId, reason: str, created_at: datetime
    ) -> StampEvent:
        """Set the counter to zero and record a RESET event."""
        self._store.check_available("InMemoryStampRepository.reset_stamps")
        row = self._store.ensure_user(user_id)
        row["stamps"] = 0
        return self._append_event(user_id, reason, created_at, StampEventType.RESET)

    async def find_recent_events(self, user_id: UserId, limit: int) -> list[StampEvent]:
        """Find a user's newest events."""
        self._store.check_available("InMemoryStampRepository.find_recent_events")
        return [row_to_stamp_event(row) for row in self._recent_rows(user_id, limit)]

    async def find_last_event_at(self, user_id: UserId) -> Optional[datetime]:
        """Get the timestamp of the user's newest event."""
        self._store.check_available("InMemoryStampRepository.find_last_event_at")
        timestamps = [
            row["created_at"]
            for row in self._store.stamp_events
            if row["user_id"] == user_id
        ]
        return max(timestamps) if timestamps else None

    async def snapshot(self, user_id: UserId, limit: int) -> Optional[StampSnapshot]:
        """Read counter and newest events in one consistent read."""
        self._store.check_available("InMemoryStampRepository.snapshot")
        row = self._store.users.get(user_id)
        if row is None:
            return None
        return StampSnapshot(
            user=row_to_user(row),
            recent_events=[
                row_to_stamp_event(event) for event in self._recent_rows(user_id, limit)
            ],
        )
