"""Comment ledger domain service."""

from datetime import datetime
from typing import Optional

import logfire

from sodfa.domain.error import IndexUnavailableError, NotFoundError, ValidationError
from sodfa.domain.model import Comment, ResolvedIdentity
from sodfa.domain.repository import CommentRepository, StoryRepository
from sodfa.domain.value import CommentId, IdentityClass, OwnerKey, StoryId
from sodfa.domain.value.common import ValueObject

from .base import Service

MISSING_INDEX_WARNING = (
    "Comments were sorted locally because the store index is not deployed"
)


class CommentListing(ValueObject):
    """Comments on a story, newest first, with an optional degradation note."""

    comments: list[Comment]
    warning: Optional[str] = None


def newest_first(comments: list[Comment]) -> list[Comment]:
    """Sort comments by creation time, newest first.

    Comments whose server timestamp is not resolved yet count as newest.
    """

    def key(comment: Comment) -> float:
        created_at: Optional[datetime] = comment.created_at
        return created_at.timestamp() if created_at else float("inf")

    return sorted(comments, key=key, reverse=True)


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        story_repository: StoryRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            story_repository: Story repository
        """
        self.comment_repository = comment_repository
        self.story_repository = story_repository

    async def add_comment(
        self, story_id: StoryId, text: str, identity: ResolvedIdentity
    ) -> Comment:
        """Append a comment to a story.

        Args:
            story_id: Story ID
            text: Comment text
            identity: Resolved actor identity

        Returns:
            Created comment

        Raises:
            ValidationError: If the text is empty after trimming
            NotFoundError: If the story does not exist
        """
        with logfire.span(
            "comment_service.add_comment",
            story_id=story_id,
            identity_class=identity.identity_class.value,
        ):
            content = (text or "").strip()
            if not content:
                raise ValidationError("Comment text is required")

            story = await self.story_repository.find_by_id(story_id)
            if story is None:
                logfire.warn("Comment on non-existent story", story_id=story_id)
                raise NotFoundError("Story", story_id)

            author_id: Optional[OwnerKey]
            match identity.identity_class:
                case IdentityClass.AUTHENTICATED:
                    author_id = identity.owner_key
                case IdentityClass.SHADOW | IdentityClass.PSEUDO:
                    author_id = None

            comment = Comment(
                id=CommentId(""),  # Assigned by the store
                story_id=story_id,
                author_id=author_id,
                author=identity.display_name,
                is_anonymous=identity.is_anonymous,
                content=content,
            )

            saved = await self.comment_repository.create(comment)
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                story_id=story_id,
                is_anonymous=saved.is_anonymous,
            )
            return saved

    async def list_comments(
        self, story_id: StoryId, limit: Optional[int] = None
    ) -> CommentListing:
        """List comments on a story, newest first.

        When the store cannot serve the sorted query (missing composite
        index), comments are fetched unordered, sorted here, and the listing
        carries a warning.

        Args:
            story_id: Story ID
            limit: Maximum number of comments

        Returns:
            Comment listing
        """
        with logfire.span("comment_service.list_comments", story_id=story_id):
            try:
                comments = await self.comment_repository.find_by_story(
                    story_id, limit=limit
                )
                return CommentListing(comments=comments)
            except IndexUnavailableError as e:
                logfire.warn(
                    "Comment index unavailable, sorting locally",
                    story_id=story_id,
                    error=str(e),
                )

            comments = newest_first(
                await self.comment_repository.find_by_story(story_id, ordered=False)
            )
            if limit is not None:
                comments = comments[:limit]
            return CommentListing(comments=comments, warning=MISSING_INDEX_WARNING)
