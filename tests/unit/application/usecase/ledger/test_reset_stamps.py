"""Unit tests for ResetStampsUseCase."""

import pytest

from stampcard.application.usecase.ledger.reset_stamps import (
    ResetStampsRequest,
    ResetStampsUseCase,
)
from stampcard.domain.service import LedgerService, StatusService
from stampcard.domain.value import StampEventType, UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_reset_clears_counter_and_records_event(unit_env):
    """Reset sets the counter to zero with a RESET event on top."""
    ledger = await unit_env.get(LedgerService)
    status_service = await unit_env.get(StatusService)
    use_case = await unit_env.get(ResetStampsUseCase)
    for _ in range(3):
        await ledger.grant(UserId("frank"), "admin_grant")

    response = await use_case.execute(ResetStampsRequest(user_id="frank"))

    assert response.id == "frank"
    assert response.stamps == 0
    status = await status_service.project(UserId("frank"))
    assert status.recent_events[0].event_type == StampEventType.RESET
    assert status.recent_events[0].reason == "user_reset"


@pytest.mark.asyncio
async def test_reset_unknown_user_creates_it(unit_env):
    """Resetting a card that was never read still yields a zero card."""
    use_case = await unit_env.get(ResetStampsUseCase)

    response = await use_case.execute(ResetStampsRequest(user_id="gina"))

    assert response.stamps == 0
