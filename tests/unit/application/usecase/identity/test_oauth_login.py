"""Unit tests for OAuthLoginUseCase with the mock Google client."""

import pytest

from stampcard.application.usecase.identity.get_profile import (
    GetProfileRequest,
    GetProfileUseCase,
)
from stampcard.application.usecase.identity.oauth_login import (
    OAuthLoginRequest,
    OAuthLoginUseCase,
)
from stampcard.domain.service import AuthService
from stampcard.domain.value import AuthProvider
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_first_login_creates_user_and_profile(unit_env):
    """The first Google login creates a user with a profile from the payload."""
    use_case = await unit_env.get(OAuthLoginUseCase)
    get_profile = await unit_env.get(GetProfileUseCase)

    session = await use_case.execute(
        OAuthLoginRequest(provider=AuthProvider.GOOGLE, code="code", state="state")
    )
    profile = await get_profile.execute(GetProfileRequest(user_id=session.user_id))

    assert session.token
    assert profile.profile.username == "Mock Google User"
    assert profile.profile.mail_address == "mock@gmail.com"
    assert [i.provider for i in profile.identities] == [AuthProvider.GOOGLE]


@pytest.mark.asyncio
async def test_second_login_resolves_same_user(unit_env):
    """The provider subject maps to one user across logins."""
    use_case = await unit_env.get(OAuthLoginUseCase)
    request = OAuthLoginRequest(provider=AuthProvider.GOOGLE, code="code", state="s")

    first = await use_case.execute(request)
    second = await use_case.execute(request)

    assert first.user_id == second.user_id


@pytest.mark.asyncio
async def test_google_is_available_in_tests(unit_env):
    """The mocked provider is registered with the auth service."""
    auth_service = await unit_env.get(AuthService)

    assert auth_service.is_available(AuthProvider.GOOGLE)
    url = await auth_service.initiate_login(AuthProvider.GOOGLE, "xyz")
    assert "state=xyz" in url


def test_google_is_unavailable_without_client():
    """Providers without a client are reported as unavailable."""
    auth_service = AuthService(oauth_clients={})

    assert not auth_service.is_available(AuthProvider.GOOGLE)
