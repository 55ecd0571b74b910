"""Shared helpers for store-backed repositories."""

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import Optional, TypeVar

import logfire

from sodfa.adapter.error import DocumentMissingError, MissingIndexError, StoreError
from sodfa.adapter.store import StoredDocument
from sodfa.domain.error import (
    IndexUnavailableError,
    InfrastructureError,
    NotFoundError,
)
from sodfa.persistence.mappers import DocumentMappingError

ModelT = TypeVar("ModelT")


@contextmanager
def translate_store_errors(
    operation: str,
    resource: Optional[str] = None,
    resource_id: Optional[str] = None,
) -> Iterator[None]:
    """Re-raise adapter store errors as domain errors.

    Args:
        operation: Human readable name of the repository operation
        resource: Resource name reported when an updated document is missing
        resource_id: Identifier reported when an updated document is missing

    Raises:
        NotFoundError: If an update addressed a missing document
        IndexUnavailableError: If the store needs a composite index
        InfrastructureError: For a malformed document or any other store
            failure
    """
    try:
        yield
    except DocumentMissingError as e:
        if resource is None:
            raise InfrastructureError(f"{operation} failed: {e}") from e
        raise NotFoundError(resource, resource_id or "") from e
    except MissingIndexError as e:
        raise IndexUnavailableError(f"{operation}: {e}") from e
    except StoreError as e:
        raise InfrastructureError(f"{operation} failed: {e}") from e
    except DocumentMappingError as e:
        logfire.error(
            "Malformed document",
            collection=e.collection,
            doc_id=e.doc_id,
            operation=operation,
            error=str(e),
        )
        raise InfrastructureError(f"{operation} failed: {e}") from e


def map_documents(
    docs: Iterable[StoredDocument], mapper: Callable[[StoredDocument], ModelT]
) -> list[ModelT]:
    """Map query results, skipping documents that cannot be read.

    One bad document must not hide the rest of a listing.
    """
    models: list[ModelT] = []
    for doc in docs:
        try:
            models.append(mapper(doc))
        except DocumentMappingError as e:
            logfire.warn(
                "Skipping malformed document",
                collection=e.collection,
                doc_id=e.doc_id,
                error=str(e),
            )
    return models
