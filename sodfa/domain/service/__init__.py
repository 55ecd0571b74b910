"""Domain services."""

from .base import Service
from .comment_service import CommentListing, CommentService
from .identity_service import IdentityService
from .jwt_service import JWTService
from .reaction_service import ReactionOutcome, ReactionService
from .session_service import IdentityProvider, SessionService
from .story_service import StoryPage, StoryService

__all__ = [
    "CommentListing",
    "CommentService",
    "IdentityProvider",
    "IdentityService",
    "JWTService",
    "ReactionOutcome",
    "ReactionService",
    "Service",
    "SessionService",
    "StoryPage",
    "StoryService",
]
