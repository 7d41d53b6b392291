"""Admin grant gateway domain service."""

import hmac

import logfire

from stampcard.config import AdminSettings
from stampcard.domain.error import BadRequestError, UnauthorizedError
from stampcard.domain.value import StampReason, UserId
from stampcard.util.error import ConfigurationError

from .base import Service
from .ledger_service import LedgerService


class AdminGrantService(Service):
    """Authorizes third-party grants with a shared admin token.

    This is the only path that adds stamps to a user other than the caller.
    """

    def __init__(self, ledger_service: LedgerService, admin_settings: AdminSettings) -> None:
        """Initialize admin grant service.

        Args:
            ledger_service: Ledger domain service
            admin_settings: Admin configuration holding the token
        """
        self.ledger_service = ledger_service
        self.admin_settings = admin_settings

    def authorize(self, supplied_token: str | None) -> None:
        """Check a supplied admin token.

        Args:
            supplied_token: Token sent by the caller

        Raises:
            ConfigurationError: If no admin token is configured
            UnauthorizedError: If the token does not match
        """
        expected = self.admin_settings.token
        if not expected:
            logfire.error("Admin grant attempted without configured token")
            raise ConfigurationError("ADMIN_TOKEN is not configured.")

        if not hmac.compare_digest(
            (supplied_token or "").encode("utf-8"), expected.encode("utf-8")
        ):
            logfire.warn("Admin token rejected")
            raise UnauthorizedError()

    async def authorize_and_grant(
        self, supplied_token: str | None, target_user_id: str | None
    ) -> int:
        """Grant one stamp to a user on behalf of an admin.

        Authorization is checked before anything else, so a rejected call
        leaves the ledger untouched.

        Args:
            supplied_token: Token sent by the caller
            target_user_id: User receiving the stamp

        Returns:
            Counter after the grant

        Raises:
            ConfigurationError: If no admin token is configured
            UnauthorizedError: If the token does not match
            BadRequestError: If target_user_id is empty
        """
        with logfire.span("admin_grant_service.authorize_and_grant"):
            self.authorize(supplied_token)

            if not target_user_id or not target_user_id.strip():
                raise BadRequestError("userId is required.")

            stamps = await self.ledger_service.grant(
                UserId(target_user_id), StampReason.ADMIN_GRANT.value
            )
            logfire.info("Admin grant applied", user_id=target_user_id, stamps=stamps)
            return stamps
