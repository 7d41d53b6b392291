"""PostgreSQL repository implementations."""

from stampcard.persistence.repository.auth_identity import (
    PostgresAuthIdentityRepository,
)
from stampcard.persistence.repository.profile import PostgresProfileRepository
from stampcard.persistence.repository.stamp import PostgresStampRepository
from stampcard.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresStampRepository",
    "PostgresProfileRepository",
    "PostgresAuthIdentityRepository",
]
