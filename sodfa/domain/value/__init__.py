"""Domain value objects for Sodfa."""

from sodfa.domain.value.identifiers import CommentId, OwnerKey, ReactionId, StoryId
from sodfa.domain.value.types import (
    PSEUDO_OWNER_PREFIX,
    PSEUDO_TOKEN_ALPHABET,
    PSEUDO_TOKEN_LENGTH,
    IdentityClass,
    PseudoToken,
    ReactionType,
    StorySortOrder,
    StoryStatus,
    TagName,
)

__all__ = [
    # Identifiers
    "StoryId",
    "CommentId",
    "ReactionId",
    "OwnerKey",
    # Types
    "IdentityClass",
    "PseudoToken",
    "ReactionType",
    "StorySortOrder",
    "StoryStatus",
    "TagName",
    "PSEUDO_OWNER_PREFIX",
    "PSEUDO_TOKEN_ALPHABET",
    "PSEUDO_TOKEN_LENGTH",
]
