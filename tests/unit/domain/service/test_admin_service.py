"""Unit tests for AdminGrantService."""

import pytest

from stampcard.config import AdminSettings
from stampcard.domain.error import BadRequestError, UnauthorizedError
from stampcard.domain.service import AdminGrantService, LedgerService
from stampcard.persistence.repository.inmemory import (
    InMemoryStampRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from stampcard.util.error import ConfigurationError
from tests.conftest import ADMIN_TOKEN, make_settings
from tests.harness import create_env_fixture

unit_env = create_env_fixture(settings=make_settings())


class TestAuthorizeAndGrant:
    """Tests for authorize_and_grant method."""

    @pytest.mark.asyncio
    async def test_valid_token_grants_one_stamp(self, unit_env):
        """The configured token grants a stamp with the admin reason."""
        admin_service = await unit_env.get(AdminGrantService)
        store = await unit_env.get(InMemoryStore)

        stamps = await admin_service.authorize_and_grant(ADMIN_TOKEN, "u1")

        assert stamps == 1
        assert store.stamp_events[-1]["reason"] == "admin_grant"
        assert store.stamp_events[-1]["event_type"] == "ADD"

    @pytest.mark.asyncio
    async def test_wrong_token_performs_no_mutation(self, unit_env):
        """A wrong token is rejected before the ledger is touched."""
        admin_service = await unit_env.get(AdminGrantService)
        store = await unit_env.get(InMemoryStore)

        with pytest.raises(UnauthorizedError):
            await admin_service.authorize_and_grant("wrong-token", "u1")

        assert store.users == {}
        assert store.stamp_events == []

    @pytest.mark.asyncio
    async def test_missing_token_is_unauthorized(self, unit_env):
        """No token header at all is unauthorized."""
        admin_service = await unit_env.get(AdminGrantService)

        with pytest.raises(UnauthorizedError):
            await admin_service.authorize_and_grant(None, "u1")

    @pytest.mark.asyncio
    async def test_empty_target_is_bad_request(self, unit_env):
        """A valid token without a target user is a bad request."""
        admin_service = await unit_env.get(AdminGrantService)
        store = await unit_env.get(InMemoryStore)

        with pytest.raises(BadRequestError, match="userId is required"):
            await admin_service.authorize_and_grant(ADMIN_TOKEN, "")

        assert store.stamp_events == []


@pytest.mark.asyncio
async def test_unconfigured_token_is_a_configuration_error():
    """Without a configured token every grant fails, even an empty one."""
    store = InMemoryStore()
    ledger = LedgerService(
        user_repository=InMemoryUserRepository(store),
        stamp_repository=InMemoryStampRepository(store),
    )
    admin_service = AdminGrantService(ledger, AdminSettings(token=""))

    with pytest.raises(ConfigurationError, match="ADMIN_TOKEN is not configured"):
        await admin_service.authorize_and_grant("", "u1")

    assert store.stamp_events == []
