"""Mock persistence providers for testing."""

from dishka import Scope, provide

from stampcard.domain.repository import (
    AuthIdentityRepository,
    ProfileRepository,
    StampRepository,
    UserRepository,
)
from stampcard.persistence.repository.inmemory import (
    InMemoryAuthIdentityRepository,
    InMemoryProfileRepository,
    InMemoryStampRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from stampcard.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives for the whole container, so every request of one test
    (or one test client) sees the same rows; each container starts empty.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory store."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_stamp_repository(self, store: InMemoryStore) -> StampRepository:
        """Provide in-memory stamp ledger repository."""
        return InMemoryStampRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, store: InMemoryStore) -> ProfileRepository:
        """Provide in-memory profile repository."""
        return InMemoryProfileRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_auth_identity_repository(
        self, store: InMemoryStore
    ) -> AuthIdentityRepository:
        """Provide in-memory auth identity repository."""
        return InMemoryAuthIdentityRepository(store)
