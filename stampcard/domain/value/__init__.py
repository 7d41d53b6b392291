"""Domain value objects for the stamp card."""

from stampcard.domain.value.identifiers import (
    AuthIdentityId,
    StampEventId,
    UserId,
)
from stampcard.domain.value.types import (
    MAX_JOB_LENGTH,
    MAX_MAIL_LENGTH,
    MAX_PROVIDER_KEY_LENGTH,
    MAX_STAMPS,
    MAX_USER_ID_LENGTH,
    MAX_USERNAME_LENGTH,
    MILESTONES,
    RECENT_EVENT_LIMIT,
    AuthProvider,
    MailAddress,
    OAuthProviderInfo,
    StampEventType,
    StampReason,
    clamp_stamps,
    normalize_mail,
    normalize_username,
)

__all__ = [
    # Identifiers
    "UserId",
    "StampEventId",
    "AuthIdentityId",
    # Constants
    "MAX_STAMPS",
    "MAX_JOB_LENGTH",
    "MAX_MAIL_LENGTH",
    "MAX_PROVIDER_KEY_LENGTH",
    "MAX_USER_ID_LENGTH",
    "MAX_USERNAME_LENGTH",
    "MILESTONES",
    "RECENT_EVENT_LIMIT",
    # Types
    "AuthProvider",
    "MailAddress",
    "OAuthProviderInfo",
    "StampEventType",
    "StampReason",
    "clamp_stamps",
    "normalize_mail",
    "normalize_username",
]
