"""Repository interfaces for Sodfa domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from sodfa.domain.repository.cascade import CascadeDeleter
from sodfa.domain.repository.comment import CommentRepository
from sodfa.domain.repository.reaction import ReactionRepository
from sodfa.domain.repository.story import StoryRepository

__all__ = [
    "CascadeDeleter",
    "CommentRepository",
    "ReactionRepository",
    "StoryRepository",
]
