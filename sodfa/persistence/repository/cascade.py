"""Document store implementation of cascade delete."""

from sodfa.adapter.store import DocumentRef, DocumentStore
from sodfa.domain.repository import CascadeDeleter
from sodfa.domain.value import CommentId, ReactionId
from sodfa.persistence.mappers import COMMENTS, REACTIONS
from sodfa.persistence.repository.base import translate_store_errors


class StoreCascadeDeleter(CascadeDeleter):
    """Deletes a story's comments and reactions in a store batch."""

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def delete_dependents(
        self, comment_ids: list[CommentId], reaction_ids: list[ReactionId]
    ) -> None:
        """Batch delete comments and reactions."""
        refs = [DocumentRef(collection=COMMENTS, id=cid) for cid in comment_ids]
        refs.extend(DocumentRef(collection=REACTIONS, id=rid) for rid in reaction_ids)
        if not refs:
            return

        with translate_store_errors("cascade delete"):
            await self.store.batch_delete(refs)
