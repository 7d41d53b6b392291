"""Current-caller resolution at the HTTP boundary.

Two strategies identify who is calling:

- ``session``: a signed JWT cookie issued at signup or login
- ``cookie``: a plain user id cookie the visitor picks through ``/user``

Routes only see the resolved user id; services never read cookies.
"""

from abc import ABC, abstractmethod

from fastapi import Request, Response

from stampcard.config import AuthSettings, Settings
from stampcard.domain.service import JWTService


class CallerResolver(ABC):
    """Resolves and remembers the caller of a request."""

    def __init__(self, auth_settings: AuthSettings, secure_cookies: bool) -> None:
        self.auth_settings = auth_settings
        self.secure_cookies = secure_cookies

    @property
    @abstractmethod
    def cookie_name(self) -> str:
        """Cookie carrying the caller identity."""

    @abstractmethod
    def resolve(self, request: Request) -> str | None:
        """Return the caller's user id, None for anonymous requests."""

    @abstractmethod
    def remember(self, response: Response, user_id: str, token: str) -> None:
        """Bind the caller to ``user_id`` after signup or login."""

    @abstractmethod
    def select(
        self, request: Request, response: Response, requested_user_id: str | None
    ) -> str | None:
        """Pick the user shown by the card page.

        Args:
            request: Incoming request
            response: Response that may receive a cookie
            requested_user_id: ``user`` query parameter, if any

        Returns:
            User id to show, None if the caller cannot be identified
        """

    def forget(self, response: Response) -> None:
        """Drop the caller cookie."""
        response.delete_cookie(key=self.cookie_name, path="/")

    def _set_cookie(
        self, response: Response, value: str, httponly: bool, max_age: int | None
    ) -> None:
        response.set_cookie(
            key=self.cookie_name,
            value=value,
            httponly=httponly,
            secure=self.secure_cookies,
            samesite="lax",
            path="/",
            max_age=max_age,
        )


class SessionCallerResolver(CallerResolver):
    """Identifies the caller by the signed session cookie."""

    def __init__(
        self, auth_settings: AuthSettings, jwt_service: JWTService, secure_cookies: bool
    ) -> None:
        super().__init__(auth_settings, secure_cookies)
        self.jwt_service = jwt_service

    @property
    def cookie_name(self) -> str:
        return self.auth_settings.session_cookie_name

    def resolve(self, request: Request) -> str | None:
        return self.jwt_service.get_user_id_from_token(
            request.cookies.get(self.cookie_name)
        )

    def remember(self, response: Response, user_id: str, token: str) -> None:
        self._set_cookie(
            response,
            token,
            httponly=True,
            max_age=self.auth_settings.jwt_expiry_days * 24 * 60 * 60,
        )

    def select(
        self, request: Request, response: Response, requested_user_id: str | None
    ) -> str | None:
        # Signed-in callers only ever see their own card
        return self.resolve(request)


class GuestCookieCallerResolver(CallerResolver):
    """Identifies the caller by a plain user id cookie.

    The ``user`` query parameter switches the cookie to another id; without
    it, a missing cookie is locked to the guest user.
    """

    @property
    def cookie_name(self) -> str:
        return self.auth_settings.guest_cookie_name

    def resolve(self, request: Request) -> str | None:
        return request.cookies.get(self.cookie_name) or None

    def remember(self, response: Response, user_id: str, token: str) -> None:
        self._set_cookie(response, user_id, httponly=False, max_age=None)

    def select(
        self, request: Request, response: Response, requested_user_id: str | None
    ) -> str | None:
        current = self.resolve(request)
        user_id = requested_user_id or current or self.auth_settings.guest_user_id
        if requested_user_id or not current:
            self._set_cookie(response, user_id, httponly=False, max_age=None)
        return user_id


def build_caller_resolver(settings: Settings, jwt_service: JWTService) -> CallerResolver:
    """Create the resolver for the configured identity mode.

    Args:
        settings: Application settings
        jwt_service: JWT service verifying session cookies

    Returns:
        Caller resolver
    """
    secure_cookies = settings.environment == "production"
    if settings.auth.identity_mode == "cookie":
        return GuestCookieCallerResolver(settings.auth, secure_cookies)
    return SessionCallerResolver(settings.auth, jwt_service, secure_cookies)
