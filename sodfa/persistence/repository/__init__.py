"""Document store repository implementations."""

from sodfa.persistence.repository.cascade import StoreCascadeDeleter
from sodfa.persistence.repository.comment import StoreCommentRepository
from sodfa.persistence.repository.reaction import StoreReactionRepository
from sodfa.persistence.repository.story import StoreStoryRepository

__all__ = [
    "StoreStoryRepository",
    "StoreCommentRepository",
    "StoreReactionRepository",
    "StoreCascadeDeleter",
]
