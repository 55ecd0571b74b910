"""Story repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from sodfa.domain.model.story import Story
from sodfa.domain.value import OwnerKey, StoryId


class StoryRepository(ABC):
    """Repository for Story aggregate.

    Defines the contract for story persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, story_id: StoryId) -> Optional[Story]:
        """Find a story by ID.

        Args:
            story_id: The story's unique identifier

        Returns:
            The story if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_recent(self, limit: int = 50) -> list[Story]:
        """Find the newest stories.

        Args:
            limit: Maximum number of stories

        Returns:
            Stories ordered by creation time, newest first
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: OwnerKey, limit: int = 50, ordered: bool = True
    ) -> list[Story]:
        """Find stories by author.

        Args:
            author_id: Owner key of the author
            limit: Maximum number of stories
            ordered: Ask the store to sort newest first (needs a composite
                index on authorId + createdAt)

        Returns:
            List of stories

        Raises:
            IndexUnavailableError: If ordered and the store lacks the index
        """
        pass

    @abstractmethod
    async def create(self, story: Story) -> Story:
        """Persist a new story.

        The store assigns the id and timestamps; the ``id`` of the given
        story is ignored.

        Args:
            story: Story to create

        Returns:
            Stored story with its assigned id
        """
        pass

    @abstractmethod
    async def update_content(self, story: Story) -> Story:
        """Persist edited title, content, excerpt and tags.

        Args:
            story: Story carrying the new values

        Returns:
            Stored story
        """
        pass

    @abstractmethod
    async def set_counters(self, story_id: StoryId, likes: int, loves: int) -> None:
        """Write the like/love counters.

        Args:
            story_id: Story ID
            likes: New like count (>= 0)
            loves: New love count (>= 0)
        """
        pass

    @abstractmethod
    async def delete(self, story_id: StoryId) -> None:
        """Delete a story document.

        Args:
            story_id: Story ID
        """
        pass
