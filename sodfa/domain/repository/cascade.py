"""Cascade delete interface."""

from abc import ABC, abstractmethod

from sodfa.domain.value import CommentId, ReactionId


class CascadeDeleter(ABC):
    """Removes the documents that reference a story in one store batch."""

    @abstractmethod
    async def delete_dependents(
        self, comment_ids: list[CommentId], reaction_ids: list[ReactionId]
    ) -> None:
        """Delete comments and reactions atomically where the store allows.

        Args:
            comment_ids: Comments to remove
            reaction_ids: Reactions to remove
        """
        pass
