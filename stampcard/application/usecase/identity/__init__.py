"""Identity and profile use cases."""

from .get_profile import GetProfileUseCase
from .login_local import LoginLocalUseCase
from .oauth_login import OAuthLoginUseCase
from .signup_local import SignupLocalUseCase
from .update_profile import UpdateProfileUseCase

__all__ = [
    "GetProfileUseCase",
    "LoginLocalUseCase",
    "OAuthLoginUseCase",
    "SignupLocalUseCase",
    "UpdateProfileUseCase",
]
