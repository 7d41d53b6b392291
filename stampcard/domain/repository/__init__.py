"""Repository interfaces for the stamp card domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from stampcard.domain.repository.auth_identity import AuthIdentityRepository
from stampcard.domain.repository.profile import ProfileRepository
from stampcard.domain.repository.stamp import StampRepository
from stampcard.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "StampRepository",
    "ProfileRepository",
    "AuthIdentityRepository",
]
