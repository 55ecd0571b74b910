"""Mock identity provider for testing."""

from dishka import Scope, provide

from sodfa.adapter.firebase import MockIdentityProvider
from sodfa.domain.service import IdentityProvider
from sodfa.util.di.infrastructure.identity import FirebaseAuthProvider


class MockFirebaseAuthProvider(FirebaseAuthProvider):
    """Mock identity provider keeping accounts in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_identity_provider(self) -> IdentityProvider:
        """Provide mock identity provider."""
        return MockIdentityProvider()
