"""Unit tests for store-backed repositories over the in-memory store."""

import pytest

from sodfa.adapter.error import StoreError
from sodfa.adapter.store import FieldFilter
from sodfa.adapter.store.inmemory import InMemoryDocumentStore
from sodfa.domain.error import (
    IndexUnavailableError,
    InfrastructureError,
    NotFoundError,
)
from sodfa.domain.model import Comment, Reaction, Story, reaction_id_for
from sodfa.domain.value import (
    CommentId,
    OwnerKey,
    ReactionType,
    StoryId,
    TagName,
)
from sodfa.persistence.mappers import (
    COMMENTS,
    REACTIONS,
    STORIES,
    DocumentMappingError,
)
from sodfa.persistence.repository import (
    StoreCascadeDeleter,
    StoreCommentRepository,
    StoreReactionRepository,
    StoreStoryRepository,
)
from sodfa.persistence.repository.base import translate_store_errors


def _story(**overrides) -> Story:
    values = {
        "id": StoryId(""),
        "title": "Lost Book",
        "content": "A long enough story body for the repository tests.",
        "tags": [TagName("general")],
        "author_id": OwnerKey("user-a"),
        "author": "Amira",
    }
    values.update(overrides)
    return Story(**values)


def _comment(story_id: str, content: str = "hi") -> Comment:
    return Comment(
        id=CommentId(""),
        story_id=StoryId(story_id),
        author="x",
        content=content,
    )


class TestStoreStoryRepository:
    """Tests for StoreStoryRepository."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamps(self):
        repo = StoreStoryRepository(InMemoryDocumentStore())

        story = await repo.create(_story())

        assert story.id
        assert story.created_at is not None
        assert story.updated_at is not None

    @pytest.mark.asyncio
    async def test_set_counters_clamps_at_zero(self):
        repo = StoreStoryRepository(InMemoryDocumentStore())
        story = await repo.create(_story())

        await repo.set_counters(story.id, -1, 2)

        updated = await repo.find_by_id(story.id)
        assert (updated.likes, updated.loves) == (0, 2)

    @pytest.mark.asyncio
    async def test_set_counters_on_missing_story_raises_not_found(self):
        repo = StoreStoryRepository(InMemoryDocumentStore())

        with pytest.raises(NotFoundError):
            await repo.set_counters(StoryId("missing"), 1, 0)

    @pytest.mark.asyncio
    async def test_find_by_author_without_index(self):
        store = InMemoryDocumentStore(unindexed_collections={STORIES})
        repo = StoreStoryRepository(store)
        await repo.create(_story())

        with pytest.raises(IndexUnavailableError):
            await repo.find_by_author(OwnerKey("user-a"))

        assert len(await repo.find_by_author(OwnerKey("user-a"), ordered=False)) == 1


class TestStoreCommentRepository:
    """Tests for StoreCommentRepository."""

    @pytest.mark.asyncio
    async def test_find_by_story_newest_first_with_limit(self):
        repo = StoreCommentRepository(InMemoryDocumentStore())
        for content in ("a", "b", "c"):
            await repo.create(_comment("s1", content))
        await repo.create(_comment("s2", "other"))

        comments = await repo.find_by_story(StoryId("s1"), limit=2)

        assert [c.content for c in comments] == ["c", "b"]

    @pytest.mark.asyncio
    async def test_find_ids_by_story(self):
        repo = StoreCommentRepository(InMemoryDocumentStore())
        created = await repo.create(_comment("s1"))
        await repo.create(_comment("s2"))

        assert await repo.find_ids_by_story(StoryId("s1")) == [created.id]


class TestStoreReactionRepository:
    """Tests for StoreReactionRepository."""

    @pytest.mark.asyncio
    async def test_one_document_per_owner_and_story(self):
        store = InMemoryDocumentStore()
        repo = StoreReactionRepository(store)
        reaction_id = reaction_id_for("user-a", "s1")
        reaction = Reaction(
            id=reaction_id,
            user_id=OwnerKey("user-a"),
            story_id=StoryId("s1"),
            type=ReactionType.LIKE,
        )

        await repo.save(reaction)
        await repo.update_type(reaction_id, ReactionType.LOVE)

        found = await repo.find(OwnerKey("user-a"), StoryId("s1"))
        assert found.type == ReactionType.LOVE
        assert store.count(REACTIONS) == 1

    @pytest.mark.asyncio
    async def test_update_missing_reaction_raises_not_found(self):
        repo = StoreReactionRepository(InMemoryDocumentStore())

        with pytest.raises(NotFoundError):
            await repo.update_type(reaction_id_for("u", "s"), ReactionType.LOVE)

    @pytest.mark.asyncio
    async def test_unreadable_reaction_skipped_but_still_deletable(self):
        store = InMemoryDocumentStore()
        repo = StoreReactionRepository(store)
        good = await repo.save(
            Reaction(
                id=reaction_id_for("u", "s1"),
                user_id=OwnerKey("u"),
                story_id=StoryId("s1"),
                type=ReactionType.LIKE,
            )
        )
        await store.set(REACTIONS, "bad_s1", {"storyId": "s1", "type": "wow"})

        reactions = await repo.find_by_story(StoryId("s1"))
        ids = await repo.find_ids_by_story(StoryId("s1"))

        assert [r.id for r in reactions] == [good.id]
        assert sorted(ids) == sorted([good.id, "bad_s1"])


class TestStoreCascadeDeleter:
    """Tests for StoreCascadeDeleter."""

    @pytest.mark.asyncio
    async def test_deletes_comments_and_reactions(self):
        store = InMemoryDocumentStore()
        comments = StoreCommentRepository(store)
        reactions = StoreReactionRepository(store)
        comment = await comments.create(_comment("s1"))
        reaction = await reactions.save(
            Reaction(
                id=reaction_id_for("u", "s1"),
                user_id=OwnerKey("u"),
                story_id=StoryId("s1"),
                type=ReactionType.LIKE,
            )
        )

        await StoreCascadeDeleter(store).delete_dependents([comment.id], [reaction.id])

        assert store.count(COMMENTS) == 0
        assert store.count(REACTIONS) == 0


class TestTranslateStoreErrors:
    """Adapter errors become domain errors."""

    def test_generic_store_error(self):
        with pytest.raises(InfrastructureError, match="list stories failed"):
            with translate_store_errors("list stories"):
                raise StoreError("unavailable")

    def test_mapping_error(self):
        with pytest.raises(InfrastructureError, match="find story failed"):
            with translate_store_errors("find story"):
                raise DocumentMappingError(STORIES, "s1", "unknown status")


class TestInMemoryQuery:
    """Filter operators of the in-memory store."""

    @pytest.mark.asyncio
    async def test_array_contains(self):
        store = InMemoryDocumentStore()
        await store.set(STORIES, "a", {"tags": ["travel", "love"]})
        await store.set(STORIES, "b", {"tags": ["family"]})

        love = FieldFilter(field="tags", op="array-contains", value="love")

        docs = await store.query(STORIES, filters=[love])

        assert [doc.id for doc in docs] == ["a"]
