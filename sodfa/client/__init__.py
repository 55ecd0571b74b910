"""Client SDK: pseudo identity, session state and optimistic mutations."""

from .api_client import SodfaAPIError, SodfaClient
from .pseudo_identity import (
    FileStorage,
    KeyValueStorage,
    MemoryStorage,
    PseudoIdentityProvider,
)
from .reconciler import (
    CommentMutation,
    CommentThreadView,
    CommentView,
    OptimisticMutation,
    ReactionMutation,
    ReactionView,
    ReconciliationError,
)
from .session import ClientSession

__all__ = [
    "ClientSession",
    "CommentMutation",
    "CommentThreadView",
    "CommentView",
    "FileStorage",
    "KeyValueStorage",
    "MemoryStorage",
    "OptimisticMutation",
    "PseudoIdentityProvider",
    "ReactionMutation",
    "ReactionView",
    "ReconciliationError",
    "SodfaAPIError",
    "SodfaClient",
]
