"""Identity provider infrastructure providers."""

from dishka import Scope, provide

from sodfa.adapter.firebase import FirebaseIdentityProvider
from sodfa.config import Settings
from sodfa.domain.service import IdentityProvider
from sodfa.util.di.base import ProviderBase
from sodfa.util.error import ConfigurationError


class FirebaseAuthProvider(ProviderBase):
    """Identity provider component base."""

    __mock_component__ = "identity"


class ProdFirebaseAuthProvider(FirebaseAuthProvider):
    """Production identity provider (Firebase Identity Toolkit)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_provider(self, settings: Settings) -> IdentityProvider:
        """Provide Firebase identity provider.

        Raises:
            ConfigurationError: If the web API key is not set in production
        """
        if (
            settings.environment == "production"
            and settings.firebase.api_key == "CHANGE_ME_IN_PRODUCTION"
        ):
            raise ConfigurationError("FIREBASE__API_KEY must be configured")

        return FirebaseIdentityProvider(
            api_key=settings.firebase.api_key,
            base_url=settings.firebase.identity_toolkit_url,
            request_uri=settings.api.frontend_url,
        )
