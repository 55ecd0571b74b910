"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from sodfa.domain.model.reaction import Reaction
from sodfa.domain.value import OwnerKey, ReactionId, ReactionType, StoryId


class ReactionRepository(ABC):
    """Repository for Reaction entity.

    Reactions are keyed by (owner, story) so at most one exists per pair.
    """

    @abstractmethod
    async def find(self, owner_key: OwnerKey, story_id: StoryId) -> Optional[Reaction]:
        """Find an owner's reaction on a story.

        Args:
            owner_key: Owner key of the reacting identity
            story_id: Story ID

        Returns:
            The reaction if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, reaction: Reaction) -> Reaction:
        """Create a reaction row.

        Args:
            reaction: Reaction to store

        Returns:
            The saved reaction
        """
        pass

    @abstractmethod
    async def update_type(
        self, reaction_id: ReactionId, reaction_type: ReactionType
    ) -> None:
        """Replace the type of an existing reaction.

        Args:
            reaction_id: Reaction ID
            reaction_type: New reaction type
        """
        pass

    @abstractmethod
    async def delete(self, reaction_id: ReactionId) -> None:
        """Delete a reaction.

        Args:
            reaction_id: Reaction ID
        """
        pass

    @abstractmethod
    async def find_by_story(self, story_id: StoryId) -> list[Reaction]:
        """Find all reactions on a story.

        Args:
            story_id: Story ID

        Returns:
            List of reactions
        """
        pass

    @abstractmethod
    async def find_ids_by_story(self, story_id: StoryId) -> list[ReactionId]:
        """IDs of all reactions on a story (used for cascade delete)."""
        pass
