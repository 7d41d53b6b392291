"""Authentication routes."""

import logging
import secrets

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from stampcard.application.usecase.base import CamelModel
from stampcard.application.usecase.identity import (
    LoginLocalUseCase,
    OAuthLoginUseCase,
    SignupLocalUseCase,
)
from stampcard.application.usecase.identity.login_local import LoginLocalRequest
from stampcard.application.usecase.identity.oauth_login import OAuthLoginRequest
from stampcard.application.usecase.identity.signup_local import SignupLocalRequest
from stampcard.config import Settings
from stampcard.domain.error import BadRequestError
from stampcard.domain.service import AuthService
from stampcard.domain.value import (
    MAX_JOB_LENGTH,
    MAX_MAIL_LENGTH,
    MAX_USERNAME_LENGTH,
    AuthProvider,
)
from stampcard.interface.api.caller import CallerResolver

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

OAUTH_STATE_COOKIE = "oauth_state"

# Where the browser lands after an OAuth round trip
POST_LOGIN_REDIRECT = "/user"


class SignupAPIRequest(CamelModel):
    """API request for local signup."""

    username: str = Field(max_length=MAX_USERNAME_LENGTH)
    mail_address: str = Field(max_length=MAX_MAIL_LENGTH)
    description: str = ""
    job: str = Field(default="", max_length=MAX_JOB_LENGTH)
    hobbies: str = ""


class LoginAPIRequest(CamelModel):
    """API request for local login."""

    username: str
    mail_address: str


class AuthenticatedResponse(CamelModel):
    """Signed-in user."""

    id: str


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


@router.post(
    "/signup",
    response_model=AuthenticatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    body: SignupAPIRequest,
    response: Response,
    caller_resolver: FromDishka[CallerResolver],
    signup_local_use_case: FromDishka[SignupLocalUseCase],
) -> AuthenticatedResponse:
    """Register a local account and sign it in.

    Example:
        POST /auth/signup
        {"username": "法然", "mailAddress": "A@B.com", "job": "monk"}

        Response (201):
        {"id": "3f0c..."}
    """
    session = await signup_local_use_case.execute(
        SignupLocalRequest(
            username=body.username,
            mail_address=body.mail_address,
            description=body.description,
            job=body.job,
            hobbies=body.hobbies,
        )
    )
    caller_resolver.remember(response, session.user_id, session.token)
    logger.info(f"Local signup completed for user {session.user_id}")
    return AuthenticatedResponse(id=session.user_id)


@router.post("/login", response_model=AuthenticatedResponse)
async def login(
    body: LoginAPIRequest,
    response: Response,
    caller_resolver: FromDishka[CallerResolver],
    login_local_use_case: FromDishka[LoginLocalUseCase],
) -> AuthenticatedResponse:
    """Sign in with username and mail address.

    The mail address is matched case-insensitively, the username exactly
    (after trimming).
    """
    session = await login_local_use_case.execute(
        LoginLocalRequest(username=body.username, mail_address=body.mail_address)
    )
    caller_resolver.remember(response, session.user_id, session.token)
    return AuthenticatedResponse(id=session.user_id)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    caller_resolver: FromDishka[CallerResolver],
) -> LogoutResponse:
    """Logout user by clearing the identity cookie."""
    caller_resolver.forget(response)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/google/login")
async def google_login(
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Redirect to the Google consent screen.

    Raises:
        BadRequestError: If Google login is not configured
    """
    if not auth_service.is_available(AuthProvider.GOOGLE):
        logger.warning("Google login requested but not configured")
        raise BadRequestError("Google login is not configured.")

    state = secrets.token_urlsafe(32)
    auth_url = await auth_service.initiate_login(AuthProvider.GOOGLE, state)

    redirect_response = RedirectResponse(
        url=auth_url, status_code=status.HTTP_302_FOUND
    )
    redirect_response.set_cookie(
        key=OAUTH_STATE_COOKIE,
        value=state,
        httponly=True,
        secure=settings.environment == "production",
        samesite="lax",
        path="/auth",
        max_age=600,
    )
    return redirect_response


@router.get("/google/callback")
async def google_callback(
    code: str,
    state: str,
    request: Request,
    caller_resolver: FromDishka[CallerResolver],
    oauth_login_use_case: FromDishka[OAuthLoginUseCase],
) -> RedirectResponse:
    """Handle the Google OAuth callback and sign the account in.

    The first login creates the user and a profile seeded from the Google
    account; later logins resolve to the same user.

    Raises:
        BadRequestError: If the state does not match the login attempt
    """
    expected_state = request.cookies.get(OAUTH_STATE_COOKIE)
    if not expected_state or not secrets.compare_digest(expected_state, state):
        logger.warning("OAuth callback with unknown state")
        raise BadRequestError("Invalid OAuth state.")

    session = await oauth_login_use_case.execute(
        OAuthLoginRequest(provider=AuthProvider.GOOGLE, code=code, state=state)
    )
    logger.info(f"Google login completed for user {session.user_id}")

    # Cookies must be set on the returned response object
    redirect_response = RedirectResponse(
        url=POST_LOGIN_REDIRECT, status_code=status.HTTP_302_FOUND
    )
    redirect_response.delete_cookie(key=OAUTH_STATE_COOKIE, path="/auth")
    caller_resolver.remember(redirect_response, session.user_id, session.token)
    return redirect_response
