"""User aggregate root.

A user owns a stamp counter. Profiles, identities and stamp events
reference the user by id.
"""

from pydantic import Field

from stampcard.domain.model.common import DomainModel
from stampcard.domain.value import MAX_STAMPS, UserId


class User(DomainModel):
    """User aggregate root.

    ``is_admin`` is a marker only; admin grants are authorized by token.
    """

    id: UserId
    stamps: int = Field(default=0, ge=0, le=MAX_STAMPS)
    is_admin: bool = False
