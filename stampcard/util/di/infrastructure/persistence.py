"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from stampcard.config import Settings
from stampcard.domain.repository import (
    AuthIdentityRepository,
    ProfileRepository,
    StampRepository,
    UserRepository,
)
from stampcard.persistence.database import create_engine, create_session_factory
from stampcard.persistence.repository import (
    PostgresAuthIdentityRepository,
    PostgresProfileRepository,
    PostgresStampRepository,
    PostgresUserRepository,
)
from stampcard.util.di.base import ProviderBase
from stampcard.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_stamp_repository(self, session: AsyncSession) -> StampRepository:
        """Provide stamp ledger repository."""
        return PostgresStampRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_auth_identity_repository(
        self, session: AsyncSession
    ) -> AuthIdentityRepository:
        """Provide AuthIdentity repository."""
        return PostgresAuthIdentityRepository(session)
