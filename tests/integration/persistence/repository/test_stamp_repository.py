"""Integration tests for the PostgreSQL repositories.

These tests run against a real database with migrations applied. They are
skipped unless DATABASE__URL points at one.
"""

import os
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from stampcard.domain.error import DuplicateIdentityError
from stampcard.domain.model import AuthIdentity, Profile, User
from stampcard.domain.repository import (
    AuthIdentityRepository,
    ProfileRepository,
    StampRepository,
    UserRepository,
)
from stampcard.domain.service import LedgerService
from stampcard.domain.value import AuthProvider, MailAddress, StampEventType, UserId
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="needs a PostgreSQL database"
)

integration_env = create_env_fixture(unmock={"persistence"})


def _user_id() -> UserId:
    return UserId(f"it-{uuid4()}")


class TestStampRepositoryIntegration:
    """Integration tests for PostgresStampRepository."""

    @pytest.mark.asyncio
    async def test_add_stamp_caps_in_one_statement(self, integration_env):
        """The counter saturates while every grant is recorded."""
        repository = await integration_env.get(StampRepository)
        user_id = _user_id()
        now = datetime.now(timezone.utc)

        for _ in range(4):
            stamps, event = await repository.add_stamp(user_id, "admin_grant", now, 3)

        assert stamps == 3
        assert event.event_type == StampEventType.ADD
        events = await repository.find_recent_events(user_id, 10)
        assert len(events) == 4

    @pytest.mark.asyncio
    async def test_snapshot_reads_counter_and_events(self, integration_env):
        """Snapshot returns the user row with newest events first."""
        repository = await integration_env.get(StampRepository)
        user_id = _user_id()
        now = datetime.now(timezone.utc)
        await repository.add_stamp(user_id, "admin_grant", now, 13)
        await repository.reset_stamps(user_id, "user_reset", now)

        snapshot = await repository.snapshot(user_id, 3)

        assert snapshot is not None
        assert snapshot.user.stamps == 0
        assert [e.event_type for e in snapshot.recent_events] == [
            StampEventType.RESET,
            StampEventType.ADD,
        ]

    @pytest.mark.asyncio
    async def test_snapshot_of_unknown_user_is_none(self, integration_env):
        """Snapshots never create users."""
        repository = await integration_env.get(StampRepository)

        assert await repository.snapshot(_user_id(), 3) is None


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository and the ledger on top."""

    @pytest.mark.asyncio
    async def test_get_or_create_keeps_existing_row(self, integration_env):
        """A second creation reads the first row back unchanged."""
        user_repository = await integration_env.get(UserRepository)
        user_id = _user_id()

        created = await user_repository.get_or_create(user_id, is_admin=True)
        again = await user_repository.get_or_create(user_id)

        assert created == again
        assert again.is_admin is True

    @pytest.mark.asyncio
    async def test_grant_through_service(self, integration_env):
        """The ledger service reads back what it wrote."""
        ledger = await integration_env.get(LedgerService)
        user_id = _user_id()

        assert await ledger.grant(user_id, "admin_grant") == 1
        assert await ledger.last_updated_at(user_id) is not None


class TestAuthIdentityRepositoryIntegration:
    """Integration tests for PostgresAuthIdentityRepository."""

    @pytest.mark.asyncio
    async def test_register_is_all_or_nothing(self, integration_env):
        """A duplicate identity leaves no user or profile behind."""
        identities = await integration_env.get(AuthIdentityRepository)
        profiles = await integration_env.get(ProfileRepository)
        users = await integration_env.get(UserRepository)
        key = f"{uuid4()}@example.com"

        first, second = _user_id(), _user_id()
        for user_id in (first, second):
            profile = Profile(
                user_id=user_id, username="It", mail_address=MailAddress(key)
            )
            identity = AuthIdentity(
                user_id=user_id, provider=AuthProvider.LOCAL, provider_key=key
            )
            if user_id == first:
                saved = await identities.register(User(id=user_id), profile, identity)
                assert saved.id is not None
            else:
                with pytest.raises(DuplicateIdentityError):
                    await identities.register(User(id=user_id), profile, identity)

        assert await users.find_by_id(second) is None
        assert await profiles.find_by_user_id(second) is None
        found = await identities.find_by_provider(AuthProvider.LOCAL, key)
        assert found is not None and found.user_id == first
