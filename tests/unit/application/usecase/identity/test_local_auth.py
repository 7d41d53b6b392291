"""Unit tests for local signup and login use cases."""

import pytest

from stampcard.application.usecase.identity.login_local import (
    LoginLocalRequest,
    LoginLocalUseCase,
)
from stampcard.application.usecase.identity.signup_local import (
    SignupLocalRequest,
    SignupLocalUseCase,
)
from stampcard.domain.error import (
    ConflictError,
    NotFoundError,
    UsernameMismatchError,
    ValidationError,
)
from stampcard.domain.service import JWTService
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSignupLocal:
    """Tests for SignupLocalUseCase."""

    @pytest.mark.asyncio
    async def test_signup_issues_session_for_new_user(self, unit_env):
        """Signup returns the new user and a token that resolves to it."""
        use_case = await unit_env.get(SignupLocalUseCase)
        jwt_service = await unit_env.get(JWTService)

        session = await use_case.execute(
            SignupLocalRequest(username="Kim", mail_address="kim@example.com")
        )

        assert session.user_id
        assert jwt_service.get_user_id_from_token(session.token) == session.user_id

    @pytest.mark.asyncio
    async def test_duplicate_mail_conflicts(self, unit_env):
        """The same address in another case is still a duplicate."""
        use_case = await unit_env.get(SignupLocalUseCase)
        await use_case.execute(
            SignupLocalRequest(username="Kim", mail_address="kim@example.com")
        )

        with pytest.raises(ConflictError):
            await use_case.execute(
                SignupLocalRequest(username="Other", mail_address=" KIM@example.com ")
            )

    @pytest.mark.asyncio
    async def test_blank_username_is_invalid(self, unit_env):
        """Username is required."""
        use_case = await unit_env.get(SignupLocalUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                SignupLocalRequest(username="  ", mail_address="kim@example.com")
            )


class TestLoginLocal:
    """Tests for LoginLocalUseCase."""

    @pytest.mark.asyncio
    async def test_login_returns_same_user(self, unit_env):
        """Login with matching username and address finds the account."""
        signup = await unit_env.get(SignupLocalUseCase)
        login = await unit_env.get(LoginLocalUseCase)
        created = await signup.execute(
            SignupLocalRequest(username="Lee", mail_address="lee@example.com")
        )

        session = await login.execute(
            LoginLocalRequest(username="Lee", mail_address="LEE@example.com")
        )

        assert session.user_id == created.user_id
        assert session.token

    @pytest.mark.asyncio
    async def test_username_is_case_sensitive(self, unit_env):
        """A username differing only in case does not match."""
        signup = await unit_env.get(SignupLocalUseCase)
        login = await unit_env.get(LoginLocalUseCase)
        await signup.execute(
            SignupLocalRequest(username="Lee", mail_address="lee@example.com")
        )

        with pytest.raises(UsernameMismatchError):
            await login.execute(
                LoginLocalRequest(username="lee", mail_address="lee@example.com")
            )

    @pytest.mark.asyncio
    async def test_unknown_mail_is_not_found(self, unit_env):
        """Login never creates accounts."""
        login = await unit_env.get(LoginLocalUseCase)

        with pytest.raises(NotFoundError):
            await login.execute(
                LoginLocalRequest(username="Lee", mail_address="ghost@example.com")
            )
