"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stampcard.domain.model.user import User
from stampcard.domain.value import UserId


class UserRepository(ABC):
    """Repository for the User aggregate.

    Implementations clamp the stored stamp counter when building models.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_or_create(self, user_id: UserId, is_admin: bool = False) -> User:
        """Return the user, inserting a fresh row if none exists.

        Must be safe against concurrent first references: the insert is
        skipped when the id is already taken and the stored row is returned.

        Args:
            user_id: The user's unique identifier
            is_admin: Admin marker used only when the row is created

        Returns:
            The stored user
        """
        pass
