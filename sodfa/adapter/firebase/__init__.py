"""Firebase adapters."""

from .auth import FirebaseIdentityProvider, MockIdentityProvider

__all__ = ["FirebaseIdentityProvider", "MockIdentityProvider"]
