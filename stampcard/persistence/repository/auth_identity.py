"""AuthIdentity repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stampcard.domain.error import DuplicateIdentityError
from stampcard.domain.model import AuthIdentity, Profile, User
from stampcard.domain.repository import AuthIdentityRepository
from stampcard.domain.value import AuthIdentityId, AuthProvider, UserId
from stampcard.persistence.database import translate_store_errors
from stampcard.persistence.mappers import (
    auth_identity_to_dict,
    profile_to_dict,
    row_to_auth_identity,
    user_to_dict,
)
from stampcard.persistence.tables import (
    auth_identities_table,
    user_profiles_table,
    users_table,
)

UNIQUE_IDENTITY_CONSTRAINT = "uq_auth_identity_provider_key"


class PostgresAuthIdentityRepository(AuthIdentityRepository):
    """PostgreSQL implementation of AuthIdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_provider(
        self, provider: AuthProvider, provider_key: str
    ) -> Optional[AuthIdentity]:
        """Get identity by provider and provider key.

        Args:
            provider: Authentication provider
            provider_key: Normalized mail or subject id

        Returns:
            AuthIdentity if found, None otherwise
        """
        stmt = select(auth_identities_table).where(
            auth_identities_table.c.provider == provider.value,
            auth_identities_table.c.provider_key == provider_key,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()

        if not row:
            return None

        return row_to_auth_identity(dict(row))

    @translate_store_errors
    async def find_all_by_user_id(self, user_id: UserId) -> list[AuthIdentity]:
        """Find all identities for a user.

        Args:
            user_id: User ID to find identities for

        Returns:
            List of identities ordered by creation (may be empty)
        """
        stmt = (
            select(auth_identities_table)
            .where(auth_identities_table.c.user_id == user_id)
            .order_by(auth_identities_table.c.created_at, auth_identities_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_auth_identity(dict(row)) for row in result.mappings().all()]

    @translate_store_errors
    async def register(
        self, user: User, profile: Profile, identity: AuthIdentity
    ) -> AuthIdentity:
        """Insert user, profile and identity inside one savepoint.

        A unique violation on (provider, provider_key) rolls the savepoint
        back, discarding the user and profile rows as well.

        Args:
            user: New user
            profile: New profile
            identity: New identity

        Returns:
            Stored identity with its assigned id

        Raises:
            DuplicateIdentityError: If the identity is already registered
        """
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    users_table.insert().values(**user_to_dict(user))
                )
                await self.session.execute(
                    user_profiles_table.insert().values(**profile_to_dict(profile))
                )
                result = await self.session.execute(
                    auth_identities_table.insert()
                    .values(**auth_identity_to_dict(identity))
                    .returning(auth_identities_table.c.id)
                )
                identity_id = AuthIdentityId(result.scalar_one())
        except IntegrityError as e:
            if UNIQUE_IDENTITY_CONSTRAINT in str(e.orig):
                raise DuplicateIdentityError(
                    identity.provider.value, identity.provider_key
                ) from e
            raise

        return identity.model_copy(update={"id": identity_id})
