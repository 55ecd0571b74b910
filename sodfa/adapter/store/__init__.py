"""Document store adapters."""

from .base import (
    SERVER_TIMESTAMP,
    DocumentRef,
    DocumentStore,
    FieldFilter,
    OrderBy,
    StoredDocument,
)
from .inmemory import InMemoryDocumentStore

__all__ = [
    "SERVER_TIMESTAMP",
    "DocumentRef",
    "DocumentStore",
    "FieldFilter",
    "InMemoryDocumentStore",
    "OrderBy",
    "StoredDocument",
]
