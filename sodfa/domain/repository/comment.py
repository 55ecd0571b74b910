"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from sodfa.domain.model.comment import Comment
from sodfa.domain.value import CommentId, StoryId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Comments are append-only: there is no update operation.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_story(
        self, story_id: StoryId, limit: Optional[int] = None, ordered: bool = True
    ) -> list[Comment]:
        """Find comments for a story.

        Args:
            story_id: Story ID
            limit: Maximum number of comments
            ordered: Ask the store to sort newest first. The unordered form
                needs no composite index.

        Returns:
            List of comments

        Raises:
            IndexUnavailableError: If ordered and the store lacks the index
        """
        pass

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Persist a new comment (id and created_at assigned by the store).

        Args:
            comment: Comment to create

        Returns:
            Stored comment
        """
        pass

    @abstractmethod
    async def find_ids_by_story(self, story_id: StoryId) -> list[CommentId]:
        """IDs of all comments on a story (used for cascade delete)."""
        pass
