"""Admin use cases."""

from .admin_grant import AdminGrantUseCase
from .seed_admin_user import SeedAdminUserUseCase

__all__ = ["AdminGrantUseCase", "SeedAdminUserUseCase"]
