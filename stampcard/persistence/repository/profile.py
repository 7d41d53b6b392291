"""PostgreSQL implementation of Profile repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from stampcard.domain.model import Profile
from stampcard.domain.repository import ProfileRepository
from stampcard.domain.value import UserId
from stampcard.persistence.database import translate_store_errors
from stampcard.persistence.mappers import row_to_profile
from stampcard.persistence.tables import user_profiles_table


class PostgresProfileRepository(ProfileRepository):
    """PostgreSQL implementation of ProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_user_id(self, user_id: UserId) -> Optional[Profile]:
        """Find the profile of a user.

        Args:
            user_id: User ID

        Returns:
            Profile if found, None otherwise
        """
        stmt = select(user_profiles_table).where(
            user_profiles_table.c.user_id == user_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_profile(dict(row)) if row else None

    @translate_store_errors
    async def save(self, profile: Profile) -> Profile:
        """Update the editable profile fields.

        The mail address column is never written here.

        Args:
            profile: Profile to save

        Returns:
            Saved profile
        """
        stmt = (
            user_profiles_table.update()
            .where(user_profiles_table.c.user_id == profile.user_id)
            .values(
                username=profile.username,
                description=profile.description,
                job=profile.job,
                hobbies=profile.hobbies,
                updated_at=profile.updated_at,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return profile
