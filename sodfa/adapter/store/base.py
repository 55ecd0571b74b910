"""Document store contract.

The hosted backend exposes schemaless collections of JSON-like documents.
Repositories talk to it exclusively through ``DocumentStore``, which has a
Firestore implementation for production and an in-memory one for tests.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

FilterOp = Literal["==", "array-contains", "in"]


class _ServerTimestamp:
    """Sentinel replaced by the store's clock when a document is written."""

    _instance: "_ServerTimestamp | None" = None

    def __new__(cls) -> "_ServerTimestamp":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()


class StoredDocument(BaseModel):
    """A document read from the store."""

    model_config = ConfigDict(frozen=True)

    id: str
    data: dict[str, Any]


class FieldFilter(BaseModel):
    """Equality-style filter on a single field."""

    model_config = ConfigDict(frozen=True)

    field: str
    op: FilterOp = "=="
    value: Any


class OrderBy(BaseModel):
    """Single-field sort."""

    model_config = ConfigDict(frozen=True)

    field: str
    descending: bool = False


class DocumentRef(BaseModel):
    """Address of a document (collection + id)."""

    model_config = ConfigDict(frozen=True)

    collection: str
    id: str


class DocumentStore(ABC):
    """Document CRUD, filtered queries and batched deletes.

    Implementations raise ``StoreError`` subclasses from
    ``sodfa.adapter.error``; ``MissingIndexError`` signals that a query
    combining filters with a sort needs a composite index.
    """

    @abstractmethod
    async def get(self, collection: str, doc_id: str) -> StoredDocument | None:
        """Fetch a document by id, or None if it does not exist."""
        pass

    @abstractmethod
    async def create(self, collection: str, data: dict[str, Any]) -> str:
        """Create a document with a store-assigned id and return the id."""
        pass

    @abstractmethod
    async def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        """Create or overwrite the document with the given id."""
        pass

    @abstractmethod
    async def update(
        self, collection: str, doc_id: str, data: dict[str, Any]
    ) -> None:
        """Merge fields into an existing document.

        Raises:
            DocumentMissingError: If the document does not exist
        """
        pass

    @abstractmethod
    async def delete(self, collection: str, doc_id: str) -> None:
        """Delete a document (no-op if missing)."""
        pass

    @abstractmethod
    async def query(
        self,
        collection: str,
        filters: Sequence[FieldFilter] = (),
        order_by: OrderBy | None = None,
        limit: int | None = None,
    ) -> list[StoredDocument]:
        """Return documents matching all filters.

        Raises:
            MissingIndexError: If the filter/sort combination needs an index
        """
        pass

    @abstractmethod
    async def batch_delete(self, refs: Sequence[DocumentRef]) -> None:
        """Delete several documents in one atomic batch."""
        pass
