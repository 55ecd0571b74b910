"""Story domain service."""

import math
import random
from typing import Optional

import logfire

from sodfa.config import StorySettings
from sodfa.domain.error import (
    IndexUnavailableError,
    InfrastructureError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from sodfa.domain.model import ResolvedIdentity, Story, make_excerpt
from sodfa.domain.repository import (
    CascadeDeleter,
    CommentRepository,
    ReactionRepository,
    StoryRepository,
)
from sodfa.domain.value import (
    IdentityClass,
    OwnerKey,
    StoryId,
    StorySortOrder,
    StoryStatus,
    TagName,
)
from sodfa.domain.value.common import ValueObject

from .base import Service

# Stories without a status predate moderation and stay visible
VISIBLE_STATUSES = (StoryStatus.APPROVED, StoryStatus.PENDING, None)


class StoryPage(ValueObject):
    """One page of the story listing."""

    stories: list[Story]
    page: int
    total_pages: int
    total: int


def can_delete(story: Story, identity: ResolvedIdentity) -> bool:
    """Whether an identity may delete a story.

    Authenticated accounts may delete their own stories. Pseudo identities
    may delete any anonymous story; the check does not compare tokens.
    Shadow sessions may not delete.
    """
    match identity.identity_class:
        case IdentityClass.AUTHENTICATED:
            return story.author_id is not None and story.author_id == identity.owner_key
        case IdentityClass.PSEUDO:
            return story.is_anonymous
        case IdentityClass.SHADOW:
            return False


def _newest_first(stories: list[Story]) -> list[Story]:
    return sorted(
        stories,
        key=lambda s: s.created_at.timestamp() if s.created_at else float("inf"),
        reverse=True,
    )


class StoryService(Service):
    """Domain service for story submission, browsing and deletion."""

    def __init__(
        self,
        story_repository: StoryRepository,
        comment_repository: CommentRepository,
        reaction_repository: ReactionRepository,
        cascade_deleter: CascadeDeleter,
        story_settings: StorySettings,
    ) -> None:
        """Initialize story service.

        Args:
            story_repository: Story repository
            comment_repository: Comment repository (cascade delete)
            reaction_repository: Reaction repository (cascade delete)
            cascade_deleter: Batched delete of comments and reactions
            story_settings: Story rules
        """
        self.story_repository = story_repository
        self.comment_repository = comment_repository
        self.reaction_repository = reaction_repository
        self.cascade_deleter = cascade_deleter
        self.settings = story_settings

    def _validate_text(self, title: str, content: str) -> tuple[str, str]:
        title = (title or "").strip()
        content = (content or "").strip()
        if not title or not content:
            raise ValidationError("Title and content are required")
        if len(title) > self.settings.max_title_length:
            raise ValidationError(
                f"Title must be at most {self.settings.max_title_length} characters"
            )
        if len(content) < self.settings.min_content_length:
            raise ValidationError(
                f"Content must be at least {self.settings.min_content_length} characters"
            )
        return title, content

    def _normalize_tags(self, tags: Optional[list[str]]) -> list[TagName]:
        names: list[str] = []
        for tag in tags or []:
            tag = tag.strip()
            if tag and tag not in names:
                names.append(tag)
        try:
            return [TagName(name) for name in names or [self.settings.default_tag]]
        except ValueError as e:
            raise ValidationError(f"Invalid tag: {e}") from e

    async def create_story(
        self,
        title: str,
        content: str,
        tags: Optional[list[str]],
        identity: ResolvedIdentity,
        author_name: Optional[str] = None,
        is_anonymous: bool = False,
    ) -> Story:
        """Submit a story.

        The story is stored as pending with zero counters. Without tags it
        gets the default tag.

        Args:
            title: Story title
            content: Story body
            tags: Tags chosen by the author
            identity: Resolved actor identity
            author_name: Name typed on the share form
            is_anonymous: Author asked to stay anonymous

        Returns:
            Created story

        Raises:
            ValidationError: If title or content is missing or too short
        """
        with logfire.span(
            "story_service.create_story",
            identity_class=identity.identity_class.value,
        ):
            title, content = self._validate_text(title, content)
            tag_names = self._normalize_tags(tags)

            anonymous = is_anonymous or identity.is_anonymous
            if anonymous:
                author = self.settings.anonymous_display_name
            else:
                author = (
                    (author_name or "").strip()
                    or identity.display_name
                    or self.settings.fallback_display_name
                )

            author_id: Optional[OwnerKey]
            match identity.identity_class:
                case IdentityClass.AUTHENTICATED | IdentityClass.SHADOW:
                    author_id = identity.owner_key
                case IdentityClass.PSEUDO:
                    author_id = None

            story = Story(
                id=StoryId(""),  # Assigned by the store
                title=title,
                content=content,
                excerpt=make_excerpt(content, self.settings.excerpt_length),
                tags=tag_names,
                author_id=author_id,
                author=author,
                is_anonymous=anonymous,
                likes=0,
                loves=0,
                status=StoryStatus.PENDING,
            )

            saved = await self.story_repository.create(story)
            logfire.info(
                "Story created",
                story_id=saved.id,
                tags=saved.tag_names,
                is_anonymous=saved.is_anonymous,
            )
            return saved

    async def get_story(self, story_id: StoryId) -> Story:
        """Get a story by ID.

        Raises:
            NotFoundError: If the story does not exist
        """
        story = await self.story_repository.find_by_id(story_id)
        if story is None:
            raise NotFoundError("Story", story_id)
        return story

    async def update_story(
        self,
        story_id: StoryId,
        identity: ResolvedIdentity,
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> Story:
        """Edit a story's title, content or tags.

        Only the author (owner key equal to the story's author id) may edit.

        Args:
            story_id: Story ID
            identity: Resolved actor identity
            title: New title (unchanged if None)
            content: New body (unchanged if None); the excerpt follows it
            tags: New tags (unchanged if None)

        Returns:
            Updated story

        Raises:
            NotFoundError: If the story does not exist
            NotAuthorizedError: If the actor is not the author
            ValidationError: If the new values are invalid
        """
        with logfire.span("story_service.update_story", story_id=story_id):
            story = await self.get_story(story_id)

            if story.author_id is None or story.author_id != identity.owner_key:
                logfire.warn(
                    "Unauthorized story update",
                    story_id=story_id,
                    owner_key=identity.owner_key,
                )
                raise NotAuthorizedError("Story", story_id, identity.owner_key)

            new_title, new_content = self._validate_text(
                story.title if title is None else title,
                story.content if content is None else content,
            )
            updated = story.model_copy(
                update={
                    "title": new_title,
                    "content": new_content,
                    "excerpt": make_excerpt(new_content, self.settings.excerpt_length),
                    "tags": story.tags if tags is None else self._normalize_tags(tags),
                }
            )

            saved = await self.story_repository.update_content(updated)
            logfire.info("Story updated", story_id=story_id)
            return saved

    async def _visible_stories(self) -> list[Story]:
        stories = await self.story_repository.find_recent(self.settings.fetch_limit)
        return [story for story in stories if story.status in VISIBLE_STATUSES]

    async def list_stories(
        self,
        tag: Optional[str] = None,
        sort: StorySortOrder = StorySortOrder.LATEST,
        page: int = 1,
        per_page: Optional[int] = None,
    ) -> StoryPage:
        """Browse visible stories.

        The newest stories (up to the fetch limit) are filtered by status
        and tag, sorted, then paginated.

        Args:
            tag: Only stories carrying this tag
            sort: latest, popular (most likes) or random
            page: 1-based page number
            per_page: Page size (defaults to the configured size)

        Returns:
            Story page

        Raises:
            ValidationError: If page or per_page is below 1
        """
        per_page = per_page or self.settings.per_page
        if page < 1 or per_page < 1:
            raise ValidationError("page and per_page must be positive")

        with logfire.span(
            "story_service.list_stories", tag=tag, sort=sort.value, page=page
        ):
            stories = await self._visible_stories()
            if tag:
                stories = [s for s in stories if tag in s.tag_names]

            match sort:
                case StorySortOrder.LATEST:
                    stories = _newest_first(stories)
                case StorySortOrder.POPULAR:
                    stories = sorted(stories, key=lambda s: s.likes, reverse=True)
                case StorySortOrder.RANDOM:
                    stories = random.sample(stories, len(stories))

            start = (page - 1) * per_page
            return StoryPage(
                stories=stories[start : start + per_page],
                page=page,
                total_pages=math.ceil(len(stories) / per_page),
                total=len(stories),
            )

    async def list_tags(self) -> list[str]:
        """Unique tags of visible stories, or the default tag list if none."""
        stories = await self._visible_stories()
        tags: list[str] = []
        for story in stories:
            for name in story.tag_names:
                if name not in tags:
                    tags.append(name)
        return tags or list(self.settings.default_tags)

    async def list_stories_by_author(self, author_id: OwnerKey) -> list[Story]:
        """Stories submitted by an author, newest first.

        Falls back to a local sort when the store lacks the index.
        """
        with logfire.span("story_service.list_stories_by_author", author_id=author_id):
            try:
                return await self.story_repository.find_by_author(
                    author_id, limit=self.settings.fetch_limit
                )
            except IndexUnavailableError as e:
                logfire.warn(
                    "Author index unavailable, sorting locally",
                    author_id=author_id,
                    error=str(e),
                )
            return _newest_first(
                await self.story_repository.find_by_author(
                    author_id, limit=self.settings.fetch_limit, ordered=False
                )
            )

    async def delete_story(self, story_id: StoryId, identity: ResolvedIdentity) -> None:
        """Delete a story together with its comments and reactions.

        Comments and reactions go first in one store batch. A failure there
        is logged and the story is deleted anyway.

        Args:
            story_id: Story ID
            identity: Resolved actor identity

        Raises:
            NotFoundError: If the story does not exist
            NotAuthorizedError: If the identity may not delete the story
        """
        with logfire.span(
            "story_service.delete_story",
            story_id=story_id,
            identity_class=identity.identity_class.value,
        ):
            story = await self.get_story(story_id)

            if not can_delete(story, identity):
                logfire.warn(
                    "Unauthorized story delete",
                    story_id=story_id,
                    owner_key=identity.owner_key,
                )
                raise NotAuthorizedError("Story", story_id, identity.owner_key)

            try:
                comment_ids = await self.comment_repository.find_ids_by_story(story_id)
                reaction_ids = await self.reaction_repository.find_ids_by_story(
                    story_id
                )
                await self.cascade_deleter.delete_dependents(comment_ids, reaction_ids)
                logfire.info(
                    "Story dependents deleted",
                    story_id=story_id,
                    comments=len(comment_ids),
                    reactions=len(reaction_ids),
                )
            except InfrastructureError as e:
                logfire.error(
                    "Cascade delete failed, deleting story anyway",
                    story_id=story_id,
                    error=str(e),
                )

            await self.story_repository.delete(story_id)
            logfire.info("Story deleted", story_id=story_id)
