"""Unit tests for ReactionService (reaction ledger)."""

import pytest

from sodfa.domain.error import NotFoundError
from sodfa.domain.repository import ReactionRepository, StoryRepository
from sodfa.domain.service import ReactionService, StoryService
from sodfa.domain.service.reaction_service import adjusted_counters
from sodfa.domain.value import ReactionType, StoryId
from tests.conftest import LOST_BOOK_CONTENT, authenticated, pseudo, shadow
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _create_story(env):
    story_service = await env.get(StoryService)
    return await story_service.create_story(
        title="Lost Book",
        content=LOST_BOOK_CONTENT,
        tags=["travel"],
        identity=authenticated("author"),
    )


class TestTrackedReactions:
    """Authenticated and shadow identities toggle and switch."""

    @pytest.mark.asyncio
    async def test_love_toggle_scenario(self, unit_env):
        """Love twice returns the counters to 0/0."""
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        story_repo = await unit_env.get(StoryRepository)
        story = await _create_story(unit_env)
        user_a = authenticated("user-a")

        # Act
        first = await reaction_service.react(story.id, ReactionType.LOVE, user_a)
        after_first = await story_repo.find_by_id(story.id)
        second = await reaction_service.react(story.id, ReactionType.LOVE, user_a)
        after_second = await story_repo.find_by_id(story.id)

        # Assert
        assert first.reacted is True
        assert first.type == ReactionType.LOVE
        assert (after_first.likes, after_first.loves) == (0, 1)

        assert second.reacted is False
        assert second.type is None
        assert (after_second.likes, after_second.loves) == (0, 0)

    @pytest.mark.asyncio
    async def test_toggle_removes_reaction_row(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        story = await _create_story(unit_env)
        user = authenticated("user-a")

        await reaction_service.react(story.id, ReactionType.LIKE, user)
        assert await reaction_repo.find(user.owner_key, story.id) is not None

        await reaction_service.react(story.id, ReactionType.LIKE, user)
        assert await reaction_repo.find(user.owner_key, story.id) is None

    @pytest.mark.asyncio
    async def test_switch_like_to_love(self, unit_env):
        """Switching keeps one row and moves the count."""
        reaction_service = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        story_repo = await unit_env.get(StoryRepository)
        story = await _create_story(unit_env)
        user = authenticated("user-a")

        await reaction_service.react(story.id, ReactionType.LIKE, user)
        outcome = await reaction_service.react(story.id, ReactionType.LOVE, user)

        updated = await story_repo.find_by_id(story.id)
        rows = await reaction_repo.find_by_story(story.id)
        assert outcome.reacted is True
        assert outcome.type == ReactionType.LOVE
        assert (updated.likes, updated.loves) == (0, 1)
        assert len(rows) == 1
        assert rows[0].type == ReactionType.LOVE

    @pytest.mark.asyncio
    async def test_shadow_identity_is_tracked(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        story = await _create_story(unit_env)
        visitor = shadow("anon-1")

        await reaction_service.react(story.id, ReactionType.LIKE, visitor)

        rows = await reaction_repo.find_by_story(story.id)
        assert [row.user_id for row in rows] == ["anon-1"]

    @pytest.mark.asyncio
    async def test_reactions_from_different_users_add_up(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)
        story_repo = await unit_env.get(StoryRepository)
        story = await _create_story(unit_env)

        await reaction_service.react(story.id, ReactionType.LIKE, authenticated("a"))
        await reaction_service.react(story.id, ReactionType.LIKE, authenticated("b"))
        await reaction_service.react(story.id, ReactionType.LOVE, shadow("c"))

        updated = await story_repo.find_by_id(story.id)
        assert (updated.likes, updated.loves) == (2, 1)

    @pytest.mark.asyncio
    async def test_get_reaction_reports_current_type(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)
        story = await _create_story(unit_env)
        user = authenticated("user-a")

        before = await reaction_service.get_reaction(story.id, user)
        await reaction_service.react(story.id, ReactionType.LOVE, user)
        after = await reaction_service.get_reaction(story.id, user)

        assert before.reacted is False
        assert before.type is None
        assert after.reacted is True
        assert after.type == ReactionType.LOVE


class TestPseudoReactions:
    """Pseudo identities only ever add to the counters."""

    @pytest.mark.asyncio
    async def test_repeated_reactions_increment_without_rows(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)
        reaction_repo = await unit_env.get(ReactionRepository)
        story_repo = await unit_env.get(StoryRepository)
        story = await _create_story(unit_env)
        visitor = pseudo()

        outcomes = [
            await reaction_service.react(story.id, ReactionType.LIKE, visitor)
            for _ in range(3)
        ]

        updated = await story_repo.find_by_id(story.id)
        assert all(o.reacted and o.type == ReactionType.LIKE for o in outcomes)
        assert updated.likes == 3
        assert await reaction_repo.find_by_story(story.id) == []

    @pytest.mark.asyncio
    async def test_get_reaction_is_always_none(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)
        story = await _create_story(unit_env)

        await reaction_service.react(story.id, ReactionType.LOVE, pseudo())
        outcome = await reaction_service.get_reaction(story.id, pseudo())

        assert outcome.reacted is False
        assert outcome.type is None


class TestCounters:
    """Counter invariants."""

    @pytest.mark.asyncio
    async def test_missing_story_raises_not_found(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)

        with pytest.raises(NotFoundError):
            await reaction_service.react(
                StoryId("missing"), ReactionType.LIKE, authenticated()
            )

    @pytest.mark.asyncio
    async def test_counters_never_negative(self, unit_env):
        """Decrement on a zero counter clamps at 0."""
        reaction_service = await unit_env.get(ReactionService)
        story_repo = await unit_env.get(StoryRepository)
        reaction_repo = await unit_env.get(ReactionRepository)
        story = await _create_story(unit_env)
        user = authenticated("user-a")

        await reaction_service.react(story.id, ReactionType.LIKE, user)
        # Counter drifted to 0 (e.g. concurrent writer) while the row remains
        await story_repo.set_counters(story.id, 0, 0)
        await reaction_service.react(story.id, ReactionType.LIKE, user)

        updated = await story_repo.find_by_id(story.id)
        assert (updated.likes, updated.loves) == (0, 0)
        assert await reaction_repo.find(user.owner_key, story.id) is None

    @pytest.mark.asyncio
    async def test_adjusted_counters_floor_at_zero(self, unit_env):
        story = await _create_story(unit_env)

        likes, loves = adjusted_counters(
            story, {ReactionType.LIKE: -1, ReactionType.LOVE: 1}
        )

        assert (likes, loves) == (0, 1)
