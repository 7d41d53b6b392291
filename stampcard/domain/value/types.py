"""Domain value objects for the stamp card.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation and normalization rules.
"""

from enum import Enum

from pydantic import field_validator

from stampcard.domain.value.common import RootValueObject, ValueObject

# Upper bound of the stamp counter
MAX_STAMPS = 13

# Stamp counts that trigger a one-time celebration on the client
MILESTONES: tuple[int, ...] = (5, 10)

# Size of the recent history shown with the status
RECENT_EVENT_LIMIT = 3

# Column widths of user ids, usernames, mail addresses, jobs and provider keys
MAX_USER_ID_LENGTH = 255
MAX_USERNAME_LENGTH = 255
MAX_MAIL_LENGTH = 255
MAX_JOB_LENGTH = 255
MAX_PROVIDER_KEY_LENGTH = 255


def clamp_stamps(value: int) -> int:
    """Bound a stored counter to 0..MAX_STAMPS."""
    return max(0, min(MAX_STAMPS, value))


class StampEventType(str, Enum):
    """Kind of ledger mutation recorded by a stamp event."""

    ADD = "ADD"
    RESET = "RESET"


class StampReason(str, Enum):
    """Well-known reasons attached to stamp events.

    Reasons are free text; these are the ones the service itself writes.
    """

    ADMIN_GRANT = "admin_grant"
    USER_RESET = "user_reset"


class AuthProvider(str, Enum):
    """Supported authentication providers."""

    LOCAL = "local"
    GOOGLE = "google"


def normalize_mail(value: str) -> str:
    """Normalize a mail address for identity lookups (trim + lowercase)."""
    return value.strip().lower()


def normalize_username(value: str) -> str:
    """Normalize a username (trim only, case preserved)."""
    return value.strip()


class MailAddress(RootValueObject[str]):
    """Normalized mail address.

    Always stored trimmed and lowercased so lookups are case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def validate_mail(cls, v: str) -> str:
        """Normalize and check the address is not empty."""
        v = normalize_mail(v)
        if len(v) < 1 or len(v) > MAX_MAIL_LENGTH:
            raise ValueError(f"Mail address must be 1-{MAX_MAIL_LENGTH} characters")
        return v

    def matches(self, other: str) -> bool:
        """Compare against a raw address, ignoring case and surrounding space."""
        return self.root == normalize_mail(other)


class OAuthProviderInfo(ValueObject):
    """User info returned from an OAuth provider."""

    provider: AuthProvider
    provider_key: str  # Permanent subject id from the provider
    display_name: str | None = None
    email: str | None = None
