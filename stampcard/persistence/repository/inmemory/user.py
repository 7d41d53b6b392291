"""In-memory user repository for testing."""

from typing import Optional

from stampcard.domain.model.user import User
from stampcard.domain.repository.user import UserRepository
from stampcard.domain.value import UserId
from stampcard.persistence.mappers import row_to_user
from stampcard.persistence.repository.inmemory.store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        self._store.check_available("InMemoryUserRepository.find_by_id")
        row = self._store.users.get(user_id)
        return row_to_user(row) if row else None

    async def get_or_create(self, user_id: UserId, is_admin: bool = False) -> User:
        """Return the user, inserting a fresh row if none exists."""
        self._store.check_available("InMemoryUserRepository.get_or_create")
        return row_to_user(self._store.ensure_user(user_id, is_admin))
