"""Unit tests for StatusService."""

import pytest

from stampcard.domain.error import NotFoundError, StoreUnavailableError
from stampcard.domain.service import IdentityService, LedgerService, StatusService
from stampcard.domain.value import StampEventType, UserId
from stampcard.persistence.repository.inmemory import InMemoryStore
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestProject:
    """Tests for project method."""

    @pytest.mark.asyncio
    async def test_fresh_user_has_empty_status(self, unit_env):
        """A user without events has no last update and no profile."""
        ledger = await unit_env.get(LedgerService)
        status_service = await unit_env.get(StatusService)
        await ledger.get_or_create(UserId("nina"))

        status = await status_service.project(UserId("nina"))

        assert status.stamps == 0
        assert status.is_admin is False
        assert status.last_updated_at is None
        assert status.recent_events == []
        assert status.profile is None

    @pytest.mark.asyncio
    async def test_status_is_consistent_with_ledger(self, unit_env):
        """Counter, events and last update describe the same state."""
        ledger = await unit_env.get(LedgerService)
        status_service = await unit_env.get(StatusService)
        user_id = UserId("omar")
        for _ in range(5):
            await ledger.grant(user_id, "admin_grant")

        status = await status_service.project(user_id)

        assert status.stamps == 5
        assert len(status.recent_events) == 3
        assert all(e.event_type == StampEventType.ADD for e in status.recent_events)
        assert status.last_updated_at == status.recent_events[0].created_at
        assert status.last_updated_at == await ledger.last_updated_at(user_id)

    @pytest.mark.asyncio
    async def test_includes_profile_when_present(self, unit_env):
        """Signed-up users carry their profile in the status."""
        identity_service = await unit_env.get(IdentityService)
        status_service = await unit_env.get(StatusService)
        user_id = await identity_service.signup_local("pia", "pia@example.com")

        status = await status_service.project(user_id)

        assert status.profile is not None
        assert status.profile.username == "pia"

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_found(self, unit_env):
        """Projection never creates users."""
        status_service = await unit_env.get(StatusService)
        store = await unit_env.get(InMemoryStore)

        with pytest.raises(NotFoundError):
            await status_service.project(UserId("nobody"))

        assert store.users == {}

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, unit_env):
        """An unreachable store surfaces as StoreUnavailableError."""
        status_service = await unit_env.get(StatusService)
        store = await unit_env.get(InMemoryStore)
        store.available = False

        with pytest.raises(StoreUnavailableError):
            await status_service.project(UserId("anyone"))
