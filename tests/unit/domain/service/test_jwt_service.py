"""Unit tests for JWTService."""

import pytest

from stampcard.config import AuthSettings
from stampcard.domain.service import JWTService
from stampcard.util.jwt import JWTError


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="unit-test-secret"))


def test_token_round_trips_user_id(jwt_service):
    """A freshly issued token verifies to the same user."""
    token = jwt_service.create_token("user-123")

    assert jwt_service.verify_token(token).user_id == "user-123"


def test_tampered_token_is_rejected(jwt_service):
    """A token signed with another secret does not verify."""
    other = JWTService(AuthSettings(jwt_secret="another-secret"))
    token = other.create_token("user-123")

    with pytest.raises(JWTError):
        jwt_service.verify_token(token)


def test_get_user_id_from_token_never_raises(jwt_service):
    """Missing or invalid tokens yield None."""
    assert jwt_service.get_user_id_from_token(None) is None
    assert jwt_service.get_user_id_from_token("not-a-jwt") is None
