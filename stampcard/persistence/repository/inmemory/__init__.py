"""In-memory repository implementations for testing."""

from .auth_identity import InMemoryAuthIdentityRepository
from .profile import InMemoryProfileRepository
from .stamp import InMemoryStampRepository
from .store import InMemoryStore
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAuthIdentityRepository",
    "InMemoryProfileRepository",
    "InMemoryStampRepository",
    "InMemoryStore",
    "InMemoryUserRepository",
]
