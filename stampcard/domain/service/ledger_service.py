"""Stamp ledger domain service."""

from datetime import datetime, timezone

import logfire

from stampcard.domain.error import BadRequestError
from stampcard.domain.model import StampEvent, User
from stampcard.domain.repository import StampRepository, UserRepository
from stampcard.domain.value import (
    MAX_STAMPS,
    MAX_USER_ID_LENGTH,
    RECENT_EVENT_LIMIT,
    StampReason,
    UserId,
    clamp_stamps,
)

from .base import Service


class LedgerService(Service):
    """Domain service owning the stamp counter and its event history.

    Every grant or reset changes the counter and appends exactly one event;
    the pair is written atomically by the stamp repository.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        stamp_repository: StampRepository,
    ) -> None:
        """Initialize ledger service.

        Args:
            user_repository: User repository
            stamp_repository: Stamp counter and event repository
        """
        self.user_repository = user_repository
        self.stamp_repository = stamp_repository

    @staticmethod
    def clamp(stamps: int) -> int:
        """Bound a counter value to 0..MAX_STAMPS."""
        return clamp_stamps(stamps)

    async def get_or_create(self, user_id: UserId) -> User:
        """Get a user, creating it with zero stamps on first reference.

        Args:
            user_id: User ID

        Returns:
            Stored user

        Raises:
            BadRequestError: If user_id is empty or too long
        """
        self._require_user_id(user_id)
        with logfire.span("ledger_service.get_or_create", user_id=user_id):
            user = await self.user_repository.get_or_create(user_id)
            logfire.info("User resolved", user_id=user_id, stamps=user.stamps)
            return user

    async def ensure_admin_user(self, user_id: UserId) -> User:
        """Create the configured admin user with the admin marker if absent.

        An existing row is left untouched.

        Args:
            user_id: Admin user ID

        Returns:
            Stored user
        """
        self._require_user_id(user_id)
        with logfire.span("ledger_service.ensure_admin_user", user_id=user_id):
            user = await self.user_repository.get_or_create(user_id, is_admin=True)
            logfire.info("Admin user ensured", user_id=user_id, is_admin=user.is_admin)
            return user

    async def grant(self, user_id: UserId, reason: str) -> int:
        """Add one stamp, capped at MAX_STAMPS.

        An ADD event is appended on every call, including calls made while
        the counter is already at the cap.

        Args:
            user_id: Target user (created if absent)
            reason: Free-text cause recorded on the event

        Returns:
            Counter after the grant

        Raises:
            BadRequestError: If user_id is empty or too long
        """
        self._require_user_id(user_id)
        with logfire.span("ledger_service.grant", user_id=user_id, reason=reason):
            stored, event = await self.stamp_repository.add_stamp(
                user_id, reason, _utcnow(), MAX_STAMPS
            )
            stamps = self.clamp(stored)
            logfire.info(
                "Stamp granted",
                user_id=user_id,
                stamps=stamps,
                event_id=event.id,
                at_cap=stamps >= MAX_STAMPS,
            )
            return stamps

    async def reset(self, user_id: UserId) -> int:
        """Reset the counter to zero and record a RESET event.

        Args:
            user_id: Target user (created if absent)

        Returns:
            Always 0

        Raises:
            BadRequestError: If user_id is empty or too long
        """
        self._require_user_id(user_id)
        with logfire.span("ledger_service.reset", user_id=user_id):
            event = await self.stamp_repository.reset_stamps(
                user_id, StampReason.USER_RESET.value, _utcnow()
            )
            logfire.info("Stamps reset", user_id=user_id, event_id=event.id)
            return 0

    async def recent_events(
        self, user_id: UserId, limit: int = RECENT_EVENT_LIMIT
    ) -> list[StampEvent]:
        """Get the user's newest events, newest first.

        Args:
            user_id: User ID
            limit: Maximum number of events

        Returns:
            At most ``limit`` events
        """
        with logfire.span("ledger_service.recent_events", user_id=user_id, limit=limit):
            return await self.stamp_repository.find_recent_events(user_id, limit)

    async def last_updated_at(self, user_id: UserId) -> datetime | None:
        """Get the timestamp of the user's newest event.

        Args:
            user_id: User ID

        Returns:
            Timestamp, or None if the user has no events yet
        """
        with logfire.span("ledger_service.last_updated_at", user_id=user_id):
            return await self.stamp_repository.find_last_event_at(user_id)

    @staticmethod
    def _require_user_id(user_id: str) -> None:
        if not user_id or not user_id.strip():
            raise BadRequestError("userId is required.")
        if len(user_id) > MAX_USER_ID_LENGTH:
            raise BadRequestError(
                f"userId must be at most {MAX_USER_ID_LENGTH} characters."
            )


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)
