"""In-memory document store for testing."""

import secrets
from collections.abc import Sequence
from copy import deepcopy
from datetime import UTC, datetime, timedelta
from typing import Any

from sodfa.adapter.error import DocumentMissingError, MissingIndexError
from sodfa.adapter.store.base import (
    SERVER_TIMESTAMP,
    DocumentRef,
    DocumentStore,
    FieldFilter,
    OrderBy,
    StoredDocument,
)


def _matches(data: dict[str, Any], flt: FieldFilter) -> bool:
    value = data.get(flt.field)
    if flt.op == "==":
        return value == flt.value
    if flt.op == "array-contains":
        return isinstance(value, list) and flt.value in value
    if flt.op == "in":
        return value in flt.value
    raise ValueError(f"Unsupported filter operator: {flt.op}")


def _sort_key(value: Any) -> tuple[bool, Any]:
    # Missing values sort before present ones, like the hosted store
    return (value is not None, value)


class InMemoryDocumentStore(DocumentStore):
    """In-memory implementation of DocumentStore for testing.

    Args:
        unindexed_collections: Collections on which a query combining
            filters with an order_by raises ``MissingIndexError``, which
            mimics a hosted store whose composite index was never deployed.
    """

    def __init__(self, unindexed_collections: set[str] | None = None) -> None:
        self._collections: dict[str, dict[str, dict[str, Any]]] = {}
        self._clock_ticks = 0
        self.unindexed_collections = unindexed_collections or set()

    def _now(self) -> datetime:
        # Strictly increasing so writes in one test stay ordered
        self._clock_ticks += 1
        return datetime.now(UTC).replace(microsecond=0) + timedelta(
            microseconds=self._clock_ticks
        )

    def _resolve(self, data: dict[str, Any]) -> dict[str, Any]:
        resolved: dict[str, Any] = {}
        for key, value in data.items():
            resolved[key] = self._now() if value is SERVER_TIMESTAMP else deepcopy(value)
        return resolved

    def _collection(self, name: str) -> dict[str, dict[str, Any]]:
        return self._collections.setdefault(name, {})

    async def get(self, collection: str, doc_id: str) -> StoredDocument | None:
        """Fetch a document by id."""
        data = self._collection(collection).get(doc_id)
        if data is None:
            return None
        return StoredDocument(id=doc_id, data=deepcopy(data))

    async def create(self, collection: str, data: dict[str, Any]) -> str:
        """Create a document with a random 20-character id."""
        doc_id = secrets.token_hex(10)
        self._collection(collection)[doc_id] = self._resolve(data)
        return doc_id

    async def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        """Create or overwrite a document."""
        self._collection(collection)[doc_id] = self._resolve(data)

    async def update(
        self, collection: str, doc_id: str, data: dict[str, Any]
    ) -> None:
        """Merge fields into an existing document."""
        existing = self._collection(collection).get(doc_id)
        if existing is None:
            raise DocumentMissingError(f"No document to update: {collection}/{doc_id}")
        existing.update(self._resolve(data))

    async def delete(self, collection: str, doc_id: str) -> None:
        """Delete a document."""
        self._collection(collection).pop(doc_id, None)

    async def query(
        self,
        collection: str,
        filters: Sequence[FieldFilter] = (),
        order_by: OrderBy | None = None,
        limit: int | None = None,
    ) -> list[StoredDocument]:
        """Filter, sort and limit documents of a collection."""
        if filters and order_by and collection in self.unindexed_collections:
            raise MissingIndexError(
                f"The query requires an index on {collection} "
                f"({', '.join(f.field for f in filters)}, {order_by.field})"
            )

        docs = [
            StoredDocument(id=doc_id, data=deepcopy(data))
            for doc_id, data in self._collection(collection).items()
            if all(_matches(data, flt) for flt in filters)
        ]

        if order_by is not None:
            docs.sort(
                key=lambda d: _sort_key(d.data.get(order_by.field)),
                reverse=order_by.descending,
            )

        if limit is not None:
            docs = docs[:limit]
        return docs

    async def batch_delete(self, refs: Sequence[DocumentRef]) -> None:
        """Delete all referenced documents."""
        for ref in refs:
            self._collection(ref.collection).pop(ref.id, None)

    def count(self, collection: str) -> int:
        """Number of documents in a collection (test helper)."""
        return len(self._collection(collection))
