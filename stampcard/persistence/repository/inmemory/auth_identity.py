"""In-memory auth identity repository for testing."""

from typing import Optional

from stampcard.domain.error import DuplicateIdentityError
from stampcard.domain.model import AuthIdentity, Profile, User
from stampcard.domain.repository.auth_identity import AuthIdentityRepository
from stampcard.domain.value import AuthProvider, UserId
from stampcard.persistence.mappers import (
    auth_identity_to_dict,
    profile_to_dict,
    row_to_auth_identity,
    user_to_dict,
)
from stampcard.persistence.repository.inmemory.store import InMemoryStore


class InMemoryAuthIdentityRepository(AuthIdentityRepository):
    """In-memory implementation of AuthIdentityRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_provider(
        self, provider: AuthProvider, provider_key: str
    ) -> Optional[AuthIdentity]:
        """Get identity by provider and provider key."""
        self._store.check_available("InMemoryAuthIdentityRepository.find_by_provider")
        for row in self._store.auth_identities:
            if row["provider"] == provider.value and row["provider_key"] == provider_key:
                return row_to_auth_identity(row)
        return None

    async def find_all_by_user_id(self, user_id: UserId) -> list[AuthIdentity]:
        """Find all identities for a user."""
        self._store.check_available(
            "InMemoryAuthIdentityRepository.find_all_by_user_id"
        )
        return [
            row_to_auth_identity(row)
            for row in self._store.auth_identities
            if row["user_id"] == user_id
        ]

    async def register(
        self, user: User, profile: Profile, identity: AuthIdentity
    ) -> AuthIdentity:
        """Insert user, profile and identity, or nothing on a duplicate."""
        self._store.check_available("InMemoryAuthIdentityRepository.register")
        for row in self._store.auth_identities:
            if (
                row["provider"] == identity.provider.value
                and row["provider_key"] == identity.provider_key
            ):
                raise DuplicateIdentityError(
                    identity.provider.value, identity.provider_key
                )

        self._store.users.setdefault(user.id, user_to_dict(user))
        self._store.profiles[profile.user_id] = profile_to_dict(profile)
        row = auth_identity_to_dict(identity)
        row["id"] = self._store.next_id("auth_identities")
        self._store.auth_identities.append(row)
        return row_to_auth_identity(row)
