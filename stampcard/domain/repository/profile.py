"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stampcard.domain.model.profile import Profile
from stampcard.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for user profiles."""

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user.

        Args:
            user_id: The user's ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Update an existing profile's editable fields.

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass
