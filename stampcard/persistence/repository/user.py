"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from stampcard.domain.model import User
from stampcard.domain.repository import UserRepository
from stampcard.domain.value import UserId
from stampcard.persistence.database import translate_store_errors
from stampcard.persistence.mappers import row_to_user
from stampcard.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    @translate_store_errors
    async def get_or_create(self, user_id: UserId, is_admin: bool = False) -> User:
        """Insert the user unless the id is taken, then read it back.

        ``ON CONFLICT DO NOTHING`` lets concurrent first references race
        without failing; the loser simply reads the winner's row.

        Args:
            user_id: User ID
            is_admin: Admin marker for a newly created row

        Returns:
            Stored user
        """
        stmt = (
            pg_insert(users_table)
            .values(id=user_id, stamps=0, is_admin=is_admin)
            .on_conflict_do_nothing(index_elements=[users_table.c.id])
        )
        await self.session.execute(stmt)

        result = await self.session.execute(
            select(users_table).where(users_table.c.id == user_id)
        )
        return row_to_user(dict(result.mappings().one()))
