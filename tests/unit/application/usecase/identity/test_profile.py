"""Unit tests for profile use cases."""

import pytest

from stampcard.application.usecase.identity.get_profile import (
    GetProfileRequest,
    GetProfileUseCase,
)
from stampcard.application.usecase.identity.signup_local import (
    SignupLocalRequest,
    SignupLocalUseCase,
)
from stampcard.application.usecase.identity.update_profile import (
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from stampcard.domain.error import MailImmutableError, NotFoundError, ValidationError
from stampcard.domain.value import AuthProvider
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _signup(unit_env) -> str:
    signup = await unit_env.get(SignupLocalUseCase)
    session = await signup.execute(
        SignupLocalRequest(
            username="Mia", mail_address="mia@example.com", hobbies="chess"
        )
    )
    return session.user_id


@pytest.mark.asyncio
async def test_get_profile_with_identities(unit_env):
    """Profile reads include the linked local identity."""
    user_id = await _signup(unit_env)
    use_case = await unit_env.get(GetProfileUseCase)

    response = await use_case.execute(GetProfileRequest(user_id=user_id))

    assert response.user_id == user_id
    assert response.profile.username == "Mia"
    assert response.profile.hobbies == "chess"
    assert [i.provider for i in response.identities] == [AuthProvider.LOCAL]


@pytest.mark.asyncio
async def test_get_profile_without_one_is_not_found(unit_env):
    """Users created by polling have no profile."""
    use_case = await unit_env.get(GetProfileUseCase)

    with pytest.raises(NotFoundError):
        await use_case.execute(GetProfileRequest(user_id="guest"))


@pytest.mark.asyncio
async def test_update_keeps_unspecified_fields(unit_env):
    """Only supplied fields change."""
    user_id = await _signup(unit_env)
    use_case = await unit_env.get(UpdateProfileUseCase)

    profile = await use_case.execute(
        UpdateProfileRequest(user_id=user_id, username="Mia B.", job="pilot")
    )

    assert profile.username == "Mia B."
    assert profile.job == "pilot"
    assert profile.hobbies == "chess"
    assert profile.mail_address == "mia@example.com"


@pytest.mark.asyncio
async def test_update_accepts_same_mail_in_other_case(unit_env):
    """Echoing the stored address back is allowed."""
    user_id = await _signup(unit_env)
    use_case = await unit_env.get(UpdateProfileUseCase)

    profile = await use_case.execute(
        UpdateProfileRequest(
            user_id=user_id, username="Mia", mail_address="MIA@example.com"
        )
    )

    assert profile.mail_address == "mia@example.com"


@pytest.mark.asyncio
async def test_update_rejects_mail_change(unit_env):
    """The mail address cannot be edited."""
    user_id = await _signup(unit_env)
    use_case = await unit_env.get(UpdateProfileUseCase)

    with pytest.raises(MailImmutableError):
        await use_case.execute(
            UpdateProfileRequest(
                user_id=user_id, username="Mia", mail_address="new@example.com"
            )
        )


@pytest.mark.asyncio
async def test_update_rejects_blank_username(unit_env):
    """A blank username fails and leaves the stored profile as it was."""
    user_id = await _signup(unit_env)
    use_case = await unit_env.get(UpdateProfileUseCase)
    get_profile = await unit_env.get(GetProfileUseCase)

    with pytest.raises(ValidationError):
        await use_case.execute(UpdateProfileRequest(user_id=user_id, username=" "))

    response = await get_profile.execute(GetProfileRequest(user_id=user_id))
    assert response.profile.username == "Mia"
