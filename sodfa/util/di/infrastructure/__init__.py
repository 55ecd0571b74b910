"""Infrastructure providers."""

# Import bases
from .identity import FirebaseAuthProvider
from .persistence import PersistenceProvider
from .store import StoreProvider

# Import implementations (needed for __subclasses__())
from .identity import ProdFirebaseAuthProvider  # noqa: F401
from .store import ProdStoreProvider  # noqa: F401

__all__ = [
    "FirebaseAuthProvider",
    "PersistenceProvider",
    "ProdFirebaseAuthProvider",
    "ProdStoreProvider",
    "StoreProvider",
]
