"""Mock providers for testing."""

from .identity import MockFirebaseAuthProvider
from .store import MockStoreProvider
from .container import build_test_container

__all__ = [
    "MockFirebaseAuthProvider",
    "MockStoreProvider",
    "build_test_container",
]
