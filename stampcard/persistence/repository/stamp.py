"""PostgreSQL implementation of the stamp ledger repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import case, func, select, true
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from stampcard.domain.model import StampEvent, StampSnapshot
from stampcard.domain.repository import StampRepository
from stampcard.domain.value import StampEventType, UserId
from stampcard.persistence.database import translate_store_errors
from stampcard.persistence.mappers import row_to_stamp_event, row_to_user
from stampcard.persistence.tables import stamp_events_table, users_table


class PostgresStampRepository(StampRepository):
    """PostgreSQL implementation of StampRepository.

    Counter updates and event inserts share a savepoint inside the request
    transaction. The ``UPDATE`` takes the user's row lock, so mutations of
    one user serialize while different users proceed independently.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def add_stamp(
        self, user_id: UserId, reason: str, created_at: datetime, max_stamps: int
    ) -> tuple[int, StampEvent]:
        """Increment the counter (capped) and append an ADD event atomically.

        Args:
            user_id: Target user
            reason: Event reason
            created_at: Event timestamp
            max_stamps: Counter cap

        Returns:
            Tuple of (stored counter, appended event)
        """
        async with self.session.begin_nested():
            await self._ensure_user(user_id)
            stmt = (
                users_table.update()
                .where(users_table.c.id == user_id)
                .values(
                    stamps=case(
                        (users_table.c.stamps < max_stamps, users_table.c.stamps + 1),
                        else_=max_stamps,
                    )
                )
                .returning(users_table.c.stamps)
            )
            result = await self.session.execute(stmt)
            stamps = result.scalar_one()
            event = await self._append_event(
                user_id, reason, created_at, StampEventType.ADD
            )
        return stamps, event

    @translate_store_errors
    async def reset_stamps(
        self, user_id: UserId, reason: str, created_at: datetime
    ) -> StampEvent:
        """Zero the counter and append a RESET event atomically.

        Args:
            user_id: Target user
            reason: Event reason
            created_at: Event timestamp

        Returns:
            Appended event
        """
        async with self.session.begin_nested():
            await self._ensure_user(user_id)
            await self.session.execute(
                users_table.update()
                .where(users_table.c.id == user_id)
                .values(stamps=0)
            )
            event = await self._append_event(
                user_id, reason, created_at, StampEventType.RESET
            )
        return event

    @translate_store_errors
    async def find_recent_events(self, user_id: UserId, limit: int) -> list[StampEvent]:
        """Find a user's newest events.

        Args:
            user_id: User ID
            limit: Maximum number of events

        Returns:
            Events newest first
        """
        stmt = (
            select(stamp_events_table)
            .where(stamp_events_table.c.user_id == user_id)
            .order_by(
                stamp_events_table.c.created_at.desc(),
                stamp_events_table.c.id.desc(),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_stamp_event(dict(row)) for row in result.mappings().all()]

    @translate_store_errors
    async def find_last_event_at(self, user_id: UserId) -> Optional[datetime]:
        """Get MAX(created_at) over the user's events.

        Args:
            user_id: User ID

        Returns:
            Timestamp or None when the user has no events
        """
        stmt = select(func.max(stamp_events_table.c.created_at)).where(
            stamp_events_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @translate_store_errors
    async def snapshot(self, user_id: UserId, limit: int) -> Optional[StampSnapshot]:
        """Read the counter and newest events with a single statement.

        One SELECT sees one MVCC snapshot, so a concurrent grant is either
        fully visible (counter and event) or not at all.

        Args:
            user_id: User ID
            limit: Maximum number of events

        Returns:
            Snapshot if the user exists, None otherwise
        """
        events = stamp_events_table
        recent = (
            select(events)
            .where(events.c.user_id == users_table.c.id)
            .order_by(events.c.created_at.desc(), events.c.id.desc())
            .limit(limit)
            .lateral("recent")
        )
        stmt = (
            select(
                users_table.c.id,
                users_table.c.stamps,
                users_table.c.is_admin,
                recent.c.id.label("event_id"),
                recent.c.created_at,
                recent.c.reason,
                recent.c.event_type,
            )
            .select_from(users_table.outerjoin(recent, true()))
            .where(users_table.c.id == user_id)
            .order_by(
                recent.c.created_at.desc().nulls_last(),
                recent.c.id.desc().nulls_last(),
            )
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()
        if not rows:
            return None

        user = row_to_user(dict(rows[0]))
        recent_events = [
            row_to_stamp_event(
                {
                    "id": row["event_id"],
                    "user_id": row["id"],
                    "created_at": row["created_at"],
                    "reason": row["reason"],
                    "event_type": row["event_type"],
                }
            )
            for row in rows
            if row["event_id"] is not None
        ]
        return StampSnapshot(user=user, recent_events=recent_events)

    async def _ensure_user(self, user_id: UserId) -> None:
        await self.session.execute(
            pg_insert(users_table)
            .values(id=user_id, stamps=0, is_admin=False)
            .on_conflict_do_nothing(index_elements=[users_table.c.id])
        )

    async def _append_event(
        self,
        user_id: UserId,
        reason: str,
        created_at: datetime,
        event_type: StampEventType,
    ) -> StampEvent:
        stmt = (
            stamp_events_table.insert()
            .values(
                user_id=user_id,
                created_at=created_at,
                reason=reason,
                event_type=event_type.value,
            )
            .returning(*stamp_events_table.c)
        )
        result = await self.session.execute(stmt)
        return row_to_stamp_event(dict(result.mappings().one()))
