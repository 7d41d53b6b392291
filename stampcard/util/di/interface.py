"""Interface layer DI providers."""

from dishka import Scope, provide

from stampcard.config import Settings
from stampcard.domain.service import JWTService
from stampcard.interface.api.caller import CallerResolver, build_caller_resolver
from stampcard.util.di.base import ProviderBase


class ProdInterfaceProvider(ProviderBase):
    """Provides the caller identity strategy selected in settings."""

    @provide(scope=Scope.REQUEST)
    def get_caller_resolver(
        self, settings: Settings, jwt_service: JWTService
    ) -> CallerResolver:
        """Provide caller resolver for the configured identity mode."""
        return build_caller_resolver(settings, jwt_service)
