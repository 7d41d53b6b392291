"""JWT session token domain service."""

import logfire

from stampcard.config import AuthSettings
from stampcard.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str) -> str:
        """Create a session token for a user.

        Args:
            user_id: User ID

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            token = create_token(user_id, self.auth_settings)
            logfire.info("JWT token created", user_id=user_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Extract the user ID from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token).user_id
        except JWTError:
            return None
