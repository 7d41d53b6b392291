"""In-memory profile repository for testing."""

from typing import Optional

from stampcard.domain.model.profile import Profile
from stampcard.domain.repository.profile import ProfileRepository
from stampcard.domain.value import UserId
from stampcard.persistence.mappers import row_to_profile
from stampcard.persistence.repository.inmemory.store import InMemoryStore


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user."""
        self._store.check_available("InMemoryProfileRepository.find_by_user_id")
        row = self._store.profiles.get(user_id)
        return row_to_profile(row) if row else None

    async def save(self, profile: Profile) -> Profile:
        """Update the editable profile fields, leaving the mail untouched."""
        self._store.check_available("InMemoryProfileRepository.save")
        row = self._store.profiles.get(profile.user_id)
        if row is not None:
            row.update(
                username=profile.username,
                description=profile.description,
                job=profile.job,
                hobbies=profile.hobbies,
                updated_at=profile.updated_at,
            )
        return profile
