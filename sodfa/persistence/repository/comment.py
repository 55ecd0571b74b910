"""Document store implementation of Comment repository."""

from typing import Optional

from sodfa.adapter.store import DocumentStore, FieldFilter, OrderBy
from sodfa.domain.error import NotFoundError
from sodfa.domain.model import Comment
from sodfa.domain.repository import CommentRepository
from sodfa.domain.value import CommentId, StoryId
from sodfa.persistence.mappers import COMMENTS, comment_to_document, doc_to_comment
from sodfa.persistence.repository.base import map_documents, translate_store_errors


class StoreCommentRepository(CommentRepository):
    """DocumentStore implementation of CommentRepository."""

    def __init__(self, store: DocumentStore) -> None:
        """Initialize repository with a document store.

        Args:
            store: Document store client
        """
        self.store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        with translate_store_errors("find comment"):
            doc = await self.store.get(COMMENTS, comment_id)
            return doc_to_comment(doc) if doc else None

    async def find_by_story(
        self, story_id: StoryId, limit: Optional[int] = None, ordered: bool = True
    ) -> list[Comment]:
        """Find comments for a story, newest first when ordered."""
        order_by = OrderBy(field="createdAt", descending=True) if ordered else None

        with translate_store_errors("list comments"):
            docs = await self.store.query(
                COMMENTS,
                filters=[FieldFilter(field="storyId", value=story_id)],
                order_by=order_by,
                limit=limit,
            )
        return map_documents(docs, doc_to_comment)

    async def create(self, comment: Comment) -> Comment:
        """Create a comment document with a store-assigned id."""
        with translate_store_errors("create comment"):
            comment_id = await self.store.create(COMMENTS, comment_to_document(comment))
            doc = await self.store.get(COMMENTS, comment_id)
            if doc is None:
                raise NotFoundError("Comment", comment_id)
            return doc_to_comment(doc)

    async def find_ids_by_story(self, story_id: StoryId) -> list[CommentId]:
        """IDs of all comments on a story."""
        with translate_store_errors("list comment ids"):
            docs = await self.store.query(
                COMMENTS, filters=[FieldFilter(field="storyId", value=story_id)]
            )
        return [CommentId(doc.id) for doc in docs]
