"""Domain model entities for the stamp card."""

from stampcard.domain.model.auth_identity import AuthIdentity
from stampcard.domain.model.profile import Profile
from stampcard.domain.model.snapshot import StampSnapshot
from stampcard.domain.model.stamp_event import StampEvent
from stampcard.domain.model.user import User

__all__ = [
    "User",
    "StampEvent",
    "Profile",
    "AuthIdentity",
    "StampSnapshot",
]
