"""Auth identity entity.

Links a login credential to a user account.
"""

from datetime import datetime, timezone

from pydantic import Field

from stampcard.domain.model.common import DomainModel
from stampcard.domain.value import AuthIdentityId, AuthProvider, UserId


class AuthIdentity(DomainModel):
    """External or local login identity.

    ``(provider, provider_key)`` is globally unique. For local identities
    the key is the normalized mail address; for Google it is the subject id.
    ``id`` is None until the store assigns one.
    """

    id: AuthIdentityId | None = None
    user_id: UserId
    provider: AuthProvider
    provider_key: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
