"""Domain services."""

from .admin_service import AdminGrantService
from .auth_service import AuthService, OAuthClient
from .base import Service
from .identity_service import IdentityService
from .jwt_service import JWTService
from .ledger_service import LedgerService
from .milestone import crossed_milestones
from .status_service import StampStatus, StatusService

__all__ = [
    "AdminGrantService",
    "AuthService",
    "IdentityService",
    "JWTService",
    "LedgerService",
    "OAuthClient",
    "Service",
    "StampStatus",
    "StatusService",
    "crossed_milestones",
]
