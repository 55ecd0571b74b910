"""Cloud Firestore document store."""

from collections.abc import Sequence
from typing import Any

import logfire
from google.api_core import exceptions as gexc
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter as FirestoreFieldFilter

from sodfa.adapter.error import DocumentMissingError, MissingIndexError, StoreError
from sodfa.adapter.store.base import (
    SERVER_TIMESTAMP,
    DocumentRef,
    DocumentStore,
    FieldFilter,
    OrderBy,
    StoredDocument,
)

# Firestore caps a write batch at 500 operations
_BATCH_SIZE = 450


def _to_firestore(data: dict[str, Any]) -> dict[str, Any]:
    return {
        key: firestore.SERVER_TIMESTAMP if value is SERVER_TIMESTAMP else value
        for key, value in data.items()
    }


def _is_missing_index(error: gexc.GoogleAPIError) -> bool:
    # Firestore reports missing composite indexes as FAILED_PRECONDITION
    # with a console link to create the index
    return isinstance(error, gexc.FailedPrecondition) and "index" in str(error).lower()


class FirestoreDocumentStore(DocumentStore):
    """DocumentStore backed by ``google.cloud.firestore.AsyncClient``."""

    def __init__(self, client: firestore.AsyncClient) -> None:
        """Initialize store.

        Args:
            client: Async Firestore client (project and credentials resolved
                by the Google auth defaults)
        """
        self._client = client

    async def get(self, collection: str, doc_id: str) -> StoredDocument | None:
        """Fetch a document by id."""
        try:
            snapshot = await self._client.collection(collection).document(doc_id).get()
        except gexc.GoogleAPIError as e:
            logfire.error(
                "Firestore get failed",
                collection=collection,
                doc_id=doc_id,
                error=str(e),
            )
            raise StoreError(str(e)) from e

        if not snapshot.exists:
            return None
        return StoredDocument(id=snapshot.id, data=snapshot.to_dict() or {})

    async def create(self, collection: str, data: dict[str, Any]) -> str:
        """Create a document with a Firestore-assigned id."""
        try:
            _, doc_ref = await self._client.collection(collection).add(
                _to_firestore(data)
            )
        except gexc.GoogleAPIError as e:
            logfire.error("Firestore add failed", collection=collection, error=str(e))
            raise StoreError(str(e)) from e
        return doc_ref.id

    async def set(self, collection: str, doc_id: str, data: dict[str, Any]) -> None:
        """Create or overwrite a document."""
        try:
            await self._client.collection(collection).document(doc_id).set(
                _to_firestore(data)
            )
        except gexc.GoogleAPIError as e:
            logfire.error(
                "Firestore set failed",
                collection=collection,
                doc_id=doc_id,
                error=str(e),
            )
            raise StoreError(str(e)) from e

    async def update(
        self, collection: str, doc_id: str, data: dict[str, Any]
    ) -> None:
        """Merge fields into an existing document."""
        try:
            await self._client.collection(collection).document(doc_id).update(
                _to_firestore(data)
            )
        except gexc.NotFound as e:
            raise DocumentMissingError(str(e)) from e
        except gexc.GoogleAPIError as e:
            logfire.error(
                "Firestore update failed",
                collection=collection,
                doc_id=doc_id,
                error=str(e),
            )
            raise StoreError(str(e)) from e

    async def delete(self, collection: str, doc_id: str) -> None:
        """Delete a document."""
        try:
            await self._client.collection(collection).document(doc_id).delete()
        except gexc.GoogleAPIError as e:
            logfire.error(
                "Firestore delete failed",
                collection=collection,
                doc_id=doc_id,
                error=str(e),
            )
            raise StoreError(str(e)) from e

    async def query(
        self,
        collection: str,
        filters: Sequence[FieldFilter] = (),
        order_by: OrderBy | None = None,
        limit: int | None = None,
    ) -> list[StoredDocument]:
        """Run a filtered, optionally sorted and limited query."""
        query: Any = self._client.collection(collection)
        for flt in filters:
            query = query.where(filter=FirestoreFieldFilter(flt.field, flt.op, flt.value))
        if order_by is not None:
            direction = (
                firestore.Query.DESCENDING
                if order_by.descending
                else firestore.Query.ASCENDING
            )
            query = query.order_by(order_by.field, direction=direction)
        if limit is not None:
            query = query.limit(limit)

        try:
            return [
                StoredDocument(id=snapshot.id, data=snapshot.to_dict() or {})
                async for snapshot in query.stream()
            ]
        except gexc.GoogleAPIError as e:
            if _is_missing_index(e):
                logfire.warn(
                    "Firestore query needs a composite index",
                    collection=collection,
                    error=str(e),
                )
                raise MissingIndexError(str(e)) from e
            logfire.error("Firestore query failed", collection=collection, error=str(e))
            raise StoreError(str(e)) from e

    async def batch_delete(self, refs: Sequence[DocumentRef]) -> None:
        """Delete documents in write batches."""
        try:
            for start in range(0, len(refs), _BATCH_SIZE):
                batch = self._client.batch()
                for ref in refs[start : start + _BATCH_SIZE]:
                    batch.delete(self._client.collection(ref.collection).document(ref.id))
                await batch.commit()
        except gexc.GoogleAPIError as e:
            logfire.error("Firestore batch delete failed", count=len(refs), error=str(e))
            raise StoreError(str(e)) from e
