"""Auth identity repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stampcard.domain.model.auth_identity import AuthIdentity
from stampcard.domain.model.profile import Profile
from stampcard.domain.model.user import User
from stampcard.domain.value import AuthProvider, UserId


class AuthIdentityRepository(ABC):
    """Repository for login identities.

    Manages the mapping from (provider, provider_key) to users and the
    creation of new accounts.
    """

    @abstractmethod
    async def find_by_provider(
        self, provider: AuthProvider, provider_key: str
    ) -> Optional[AuthIdentity]:
        """Find an identity by provider and provider key.

        Args:
            provider: The authentication provider
            provider_key: Normalized mail (local) or subject id (OAuth)

        Returns:
            The identity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_by_user_id(self, user_id: UserId) -> list[AuthIdentity]:
        """Get all identities linked to a user.

        Args:
            user_id: The user's unique identifier

        Returns:
            List of identities ordered by creation (may be empty)
        """
        pass

    @abstractmethod
    async def register(
        self, user: User, profile: Profile, identity: AuthIdentity
    ) -> AuthIdentity:
        """Create user, profile and identity as one atomic unit.

        Either all three rows exist afterwards or none of them was written.

        Args:
            user: New user
            profile: Profile for the new user
            identity: Identity pointing at the new user

        Returns:
            The stored identity (with its store-assigned id)

        Raises:
            DuplicateIdentityError: If (provider, provider_key) is already mapped
        """
        pass
