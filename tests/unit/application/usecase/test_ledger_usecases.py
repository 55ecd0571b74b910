"""Unit tests for story, reaction and comment use cases.

Use cases return structured failures instead of raising.
"""

import pytest

from sodfa.adapter.store.inmemory import InMemoryDocumentStore
from sodfa.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from sodfa.application.usecase.common import ErrorKind
from sodfa.application.usecase.reaction import (
    GetReactionRequest,
    GetReactionUseCase,
    ReactRequest,
    ReactUseCase,
)
from sodfa.application.usecase.story import (
    CreateStoryRequest,
    CreateStoryUseCase,
    DeleteStoryRequest,
    DeleteStoryUseCase,
    GetStoryRequest,
    GetStoryUseCase,
    ListStoriesRequest,
    ListStoriesUseCase,
    UpdateStoryRequest,
    UpdateStoryUseCase,
)
from sodfa.domain.model import SessionIdentity
from sodfa.domain.value import ReactionType
from sodfa.persistence.mappers import COMMENTS, STORIES
from tests.conftest import ANONYMOUS_NAME, LOST_BOOK_CONTENT, PSEUDO_TOKEN
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = SessionIdentity(uid="alice", display_name="Alice")
BOB = SessionIdentity(uid="bob", display_name="Bob")


async def _create(env, session=ALICE, pseudo_token=None, **overrides):
    use_case = await env.get(CreateStoryUseCase)
    fields = {"title": "Lost Book", "content": LOST_BOOK_CONTENT}
    fields.update(overrides)
    return await use_case.execute(
        CreateStoryRequest(session=session, pseudo_token=pseudo_token, **fields)
    )


class TestStoryUseCases:
    """Story lifecycle through the use case boundary."""

    @pytest.mark.asyncio
    async def test_create_and_get(self, unit_env):
        get_story = await unit_env.get(GetStoryUseCase)

        created = await _create(unit_env)
        fetched = await get_story.execute(GetStoryRequest(story_id=created.story.id))

        assert created.success is True
        assert created.story.tags == ["general"]
        assert created.story.status == "pending"
        assert fetched.story.id == created.story.id

    @pytest.mark.asyncio
    async def test_create_without_identity_fails(self, unit_env):
        result = await _create(unit_env, session=None)

        assert result.success is False
        assert result.error.kind == ErrorKind.IDENTITY_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_create_with_short_content_fails(self, unit_env):
        result = await _create(unit_env, content="short")

        assert result.success is False
        assert result.error.kind == ErrorKind.VALIDATION

    @pytest.mark.asyncio
    async def test_get_missing_story(self, unit_env):
        get_story = await unit_env.get(GetStoryUseCase)

        result = await get_story.execute(GetStoryRequest(story_id="missing"))

        assert result.success is False
        assert result.error.kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_update_by_other_user_is_unauthorized(self, unit_env):
        update = await unit_env.get(UpdateStoryUseCase)
        created = await _create(unit_env)

        result = await update.execute(
            UpdateStoryRequest(session=BOB, story_id=created.story.id, title="Hijack")
        )

        assert result.success is False
        assert result.error.kind == ErrorKind.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_unauthorized_delete_keeps_story(self, unit_env):
        delete = await unit_env.get(DeleteStoryUseCase)
        get_story = await unit_env.get(GetStoryUseCase)
        created = await _create(unit_env)

        result = await delete.execute(
            DeleteStoryRequest(session=BOB, story_id=created.story.id)
        )
        fetched = await get_story.execute(GetStoryRequest(story_id=created.story.id))

        assert result.success is False
        assert result.error.kind == ErrorKind.UNAUTHORIZED
        assert fetched.success is True

    @pytest.mark.asyncio
    async def test_author_delete(self, unit_env):
        delete = await unit_env.get(DeleteStoryUseCase)
        get_story = await unit_env.get(GetStoryUseCase)
        created = await _create(unit_env)

        result = await delete.execute(
            DeleteStoryRequest(session=ALICE, story_id=created.story.id)
        )
        fetched = await get_story.execute(GetStoryRequest(story_id=created.story.id))

        assert result.success is True
        assert fetched.error.kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_list_stories(self, unit_env):
        list_stories = await unit_env.get(ListStoriesUseCase)
        await _create(unit_env, tags=["travel"])
        await _create(unit_env, tags=["family"])

        result = await list_stories.execute(ListStoriesRequest(tag="travel"))

        assert result.total == 1
        assert result.stories[0].tags == ["travel"]


class TestReactionUseCases:
    """Reactions through the use case boundary."""

    @pytest.mark.asyncio
    async def test_react_without_identity(self, unit_env):
        react = await unit_env.get(ReactUseCase)
        created = await _create(unit_env)

        result = await react.execute(
            ReactRequest(story_id=created.story.id, type=ReactionType.LIKE)
        )

        assert result.success is False
        assert result.error.kind == ErrorKind.IDENTITY_UNAVAILABLE

    @pytest.mark.asyncio
    async def test_react_and_read_back(self, unit_env):
        react = await unit_env.get(ReactUseCase)
        get_reaction = await unit_env.get(GetReactionUseCase)
        created = await _create(unit_env)

        result = await react.execute(
            ReactRequest(session=BOB, story_id=created.story.id, type=ReactionType.LOVE)
        )
        mine = await get_reaction.execute(
            GetReactionRequest(session=BOB, story_id=created.story.id)
        )

        assert result.reacted is True
        assert result.type == ReactionType.LOVE
        assert mine.type == ReactionType.LOVE

    @pytest.mark.asyncio
    async def test_react_on_missing_story(self, unit_env):
        react = await unit_env.get(ReactUseCase)

        result = await react.execute(
            ReactRequest(
                pseudo_token=PSEUDO_TOKEN, story_id="missing", type=ReactionType.LIKE
            )
        )

        assert result.error.kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_react_on_unreadable_story_is_structured_failure(self, unit_env):
        store = await unit_env.get(InMemoryDocumentStore)
        react = await unit_env.get(ReactUseCase)
        await store.set(
            STORIES,
            "broken",
            {"title": "Old", "content": "Old", "author": "x", "status": "??"},
        )

        result = await react.execute(
            ReactRequest(
                pseudo_token=PSEUDO_TOKEN, story_id="broken", type=ReactionType.LIKE
            )
        )

        assert result.success is False
        assert result.error.kind == ErrorKind.INFRASTRUCTURE


class TestCommentUseCases:
    """Comments through the use case boundary."""

    @pytest.mark.asyncio
    async def test_pseudo_comment(self, unit_env):
        add_comment = await unit_env.get(AddCommentUseCase)
        created = await _create(unit_env)

        result = await add_comment.execute(
            AddCommentRequest(
                pseudo_token=PSEUDO_TOKEN, story_id=created.story.id, text="Wow"
            )
        )

        assert result.success is True
        assert result.comment.author_id is None
        assert result.comment.author == ANONYMOUS_NAME
        assert result.comment.is_anonymous is True

    @pytest.mark.asyncio
    async def test_blank_comment_fails(self, unit_env):
        add_comment = await unit_env.get(AddCommentUseCase)
        created = await _create(unit_env)

        result = await add_comment.execute(
            AddCommentRequest(session=ALICE, story_id=created.story.id, text="  ")
        )

        assert result.success is False
        assert result.error.kind == ErrorKind.VALIDATION

    @pytest.mark.asyncio
    async def test_listing_warning_is_not_a_failure(self, unit_env):
        add_comment = await unit_env.get(AddCommentUseCase)
        list_comments = await unit_env.get(ListCommentsUseCase)
        store = await unit_env.get(InMemoryDocumentStore)
        created = await _create(unit_env)
        await add_comment.execute(
            AddCommentRequest(session=ALICE, story_id=created.story.id, text="One")
        )
        store.unindexed_collections.add(COMMENTS)

        result = await list_comments.execute(
            ListCommentsRequest(story_id=created.story.id)
        )

        assert result.success is True
        assert result.warning is not None
        assert [c.content for c in result.comments] == ["One"]
