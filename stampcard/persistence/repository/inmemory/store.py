"""Shared row storage for the in-memory repositories.

Rows are kept as plain dicts, the same shape the PostgreSQL tables return,
so the regular mappers build the domain models. Every mutation completes
without yielding to the event loop, which makes each repository call
atomic with respect to other coroutines.
"""

from typing import Any

from stampcard.domain.error import StoreUnavailableError


class InMemoryStore:
    """Tables for users, stamp events, profiles and auth identities."""

    def __init__(self) -> None:
        self.users: dict[str, dict[str, Any]] = {}
        self.stamp_events: list[dict[str, Any]] = []
        self.profiles: dict[str, dict[str, Any]] = {}
        self.auth_identities: list[dict[str, Any]] = []
        self._sequences: dict[str, int] = {}

        # Flip to False to simulate an unreachable store
        self.available = True

    def next_id(self, table: str) -> int:
        """Return the next value of a per-table id sequence."""
        value = self._sequences.get(table, 0) + 1
        self._sequences[table] = value
        return value

    def check_available(self, operation: str) -> None:
        """Raise StoreUnavailableError when the store is switched off."""
        if not self.available:
            raise StoreUnavailableError(operation)

    def ensure_user(self, user_id: str, is_admin: bool = False) -> dict[str, Any]:
        """Return the user row, inserting a fresh one if absent."""
        row = self.users.get(user_id)
        if row is None:
            row = {"id": user_id, "stamps": 0, "is_admin": is_admin}
            self.users[user_id] = row
        return row
