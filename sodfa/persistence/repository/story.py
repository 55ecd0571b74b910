"""Document store implementation of Story repository."""

from typing import Optional

from sodfa.adapter.store import DocumentStore, FieldFilter, OrderBy
from sodfa.domain.error import NotFoundError
from sodfa.domain.model import Story
from sodfa.domain.repository import StoryRepository
from sodfa.domain.value import OwnerKey, StoryId
from sodfa.persistence.mappers import STORIES, doc_to_story, story_to_document
from sodfa.persistence.repository.base import map_documents, translate_store_errors

_NEWEST_FIRST = OrderBy(field="createdAt", descending=True)


class StoreStoryRepository(StoryRepository):
    """DocumentStore implementation of StoryRepository."""

    def __init__(self, store: DocumentStore) -> None:
        """Initialize repository with a document store.

        Args:
            store: Document store client
        """
        self.store = store

    async def find_by_id(self, story_id: StoryId) -> Optional[Story]:
        """Find a story by ID."""
        with translate_store_errors("find story"):
            doc = await self.store.get(STORIES, story_id)
            return doc_to_story(doc) if doc else None

    async def find_recent(self, limit: int = 50) -> list[Story]:
        """Find the newest stories."""
        with translate_store_errors("list stories"):
            docs = await self.store.query(STORIES, order_by=_NEWEST_FIRST, limit=limit)
        return map_documents(docs, doc_to_story)

    async def find_by_author(
        self, author_id: OwnerKey, limit: int = 50, ordered: bool = True
    ) -> list[Story]:
        """Find stories by author, newest first when ordered."""
        with translate_store_errors("list stories by author"):
            docs = await self.store.query(
                STORIES,
                filters=[FieldFilter(field="authorId", value=author_id)],
                order_by=_NEWEST_FIRST if ordered else None,
                limit=limit,
            )
        return map_documents(docs, doc_to_story)

    async def create(self, story: Story) -> Story:
        """Create a story document with a store-assigned id."""
        with translate_store_errors("create story"):
            story_id = await self.store.create(STORIES, story_to_document(story))
            doc = await self.store.get(STORIES, story_id)
            if doc is None:
                raise NotFoundError("Story", story_id)
            return doc_to_story(doc)

    async def update_content(self, story: Story) -> Story:
        """Update title, content, excerpt and tags of a story."""
        data = story_to_document(story)
        fields = {key: data[key] for key in ("title", "content", "excerpt", "tags")}
        fields["updatedAt"] = data["updatedAt"]

        with translate_store_errors("update story", "Story", story.id):
            await self.store.update(STORIES, story.id, fields)
            doc = await self.store.get(STORIES, story.id)
            if doc is None:
                raise NotFoundError("Story", story.id)
            return doc_to_story(doc)

    async def set_counters(self, story_id: StoryId, likes: int, loves: int) -> None:
        """Write the like/love counters."""
        with translate_store_errors("update story counters", "Story", story_id):
            await self.store.update(
                STORIES, story_id, {"likes": max(likes, 0), "loves": max(loves, 0)}
            )

    async def delete(self, story_id: StoryId) -> None:
        """Delete a story document."""
        with translate_store_errors("delete story"):
            await self.store.delete(STORIES, story_id)
