"""Unit tests for the in-memory repositories."""

from datetime import datetime, timezone

import pytest

from stampcard.domain.error import DuplicateIdentityError, StoreUnavailableError
from stampcard.domain.model import AuthIdentity, Profile, User
from stampcard.domain.value import AuthProvider, MailAddress, UserId
from stampcard.persistence.repository.inmemory import (
    InMemoryAuthIdentityRepository,
    InMemoryStampRepository,
    InMemoryStore,
    InMemoryUserRepository,
)

NOW = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.mark.asyncio
async def test_add_stamp_caps_counter(store):
    """The counter never passes the given maximum, events keep coming."""
    repository = InMemoryStampRepository(store)

    for _ in range(4):
        stamps, _ = await repository.add_stamp(UserId("u1"), "r", NOW, max_stamps=3)

    assert stamps == 3
    assert len(store.stamp_events) == 4


@pytest.mark.asyncio
async def test_recent_events_break_ties_by_id(store):
    """Events with equal timestamps come back newest id first."""
    repository = InMemoryStampRepository(store)
    for _ in range(3):
        await repository.add_stamp(UserId("u1"), "r", NOW, max_stamps=13)

    events = await repository.find_recent_events(UserId("u1"), 2)

    assert [e.id for e in events] == [3, 2]


@pytest.mark.asyncio
async def test_unavailable_store_raises(store):
    """Every call fails with StoreUnavailableError when switched off."""
    repository = InMemoryUserRepository(store)
    store.available = False

    with pytest.raises(StoreUnavailableError):
        await repository.get_or_create(UserId("u1"))

    assert store.users == {}


@pytest.mark.asyncio
async def test_register_rejects_duplicate_identity(store):
    """A (provider, provider_key) pair maps to one user only."""
    repository = InMemoryAuthIdentityRepository(store)

    def identity(user_id: str) -> AuthIdentity:
        return AuthIdentity(
            user_id=UserId(user_id),
            provider=AuthProvider.LOCAL,
            provider_key="a@example.com",
            created_at=NOW,
        )

    def profile(user_id: str) -> Profile:
        return Profile(
            user_id=UserId(user_id),
            username="A",
            mail_address=MailAddress("a@example.com"),
            updated_at=NOW,
        )

    await repository.register(User(id=UserId("u1")), profile("u1"), identity("u1"))

    with pytest.raises(DuplicateIdentityError):
        await repository.register(User(id=UserId("u2")), profile("u2"), identity("u2"))

    assert "u2" not in store.users
    assert "u2" not in store.profiles
