"""Dependency injection wiring."""

from typing import Type

from sodfa.util.di.application import ProdApplicationProvider
from sodfa.util.di.base import Component, ProviderBase
from sodfa.util.di.core import ProdConfigProvider
from sodfa.util.di.domain import ProdDomainProvider
from sodfa.util.di.infrastructure import (
    FirebaseAuthProvider,
    PersistenceProvider,
    ProdFirebaseAuthProvider,
    ProdStoreProvider,
    StoreProvider,
)

# Order does not matter; dishka resolves across providers
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    StoreProvider,  # document store: Firestore or in-memory
    FirebaseAuthProvider,  # identity provider: Identity Toolkit or in-memory
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the provider class to install for a base.

    A base with no subclasses is installed as is. A base with subclasses is
    a swappable component (the document store, the identity provider); the
    subclass whose ``__is_mock__`` flag equals ``use_mock`` is returned.

    Args:
        base: Provider base class from ``PROVIDERS``
        use_mock: Select the in-memory implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if getattr(impl, "__is_mock__", False) == use_mock:
            return impl

    component = getattr(base, "__mock_component__", base.__name__)
    raise ValueError(
        f"No {'mock' if use_mock else 'production'} implementation for {component}"
    )


__all__ = [
    "Component",
    "FirebaseAuthProvider",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdFirebaseAuthProvider",
    "ProdStoreProvider",
    "ProviderBase",
    "StoreProvider",
    "get_provider",
]
