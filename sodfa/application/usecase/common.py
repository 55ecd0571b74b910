"""Shared request/response models for use cases.

Use cases are the ledger boundary: domain errors raised below them are
returned as structured failures, never raised to the caller.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from sodfa.domain.error import (
    AuthenticationError,
    DomainError,
    IdentityUnavailableError,
    InfrastructureError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from sodfa.domain.model import Comment, SessionIdentity, Story
from sodfa.domain.value import StoryStatus


class ErrorKind(str, Enum):
    """Failure classes surfaced to callers."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    INFRASTRUCTURE = "infrastructure"
    IDENTITY_UNAVAILABLE = "identity_unavailable"


def error_kind(error: DomainError) -> ErrorKind:
    """Classify a domain error."""
    match error:
        case ValidationError():
            return ErrorKind.VALIDATION
        case NotFoundError():
            return ErrorKind.NOT_FOUND
        case NotAuthorizedError() | AuthenticationError():
            return ErrorKind.UNAUTHORIZED
        case IdentityUnavailableError():
            return ErrorKind.IDENTITY_UNAVAILABLE
        case InfrastructureError():
            return ErrorKind.INFRASTRUCTURE
        case _:
            return ErrorKind.INFRASTRUCTURE


class OperationError(BaseModel):
    """Structured failure."""

    kind: ErrorKind
    message: str

    @classmethod
    def from_error(cls, error: DomainError) -> "OperationError":
        """Build from a domain error, keeping its message."""
        return cls(kind=error_kind(error), message=str(error))


class OperationResponse(BaseModel):
    """Base response: success flag plus optional structured error."""

    success: bool = True
    error: Optional[OperationError] = None

    @classmethod
    def failure(cls, error: DomainError):
        """Failed response for a domain error."""
        return cls(success=False, error=OperationError.from_error(error))


class ActorRequest(BaseModel):
    """Request made on behalf of an actor.

    The actor is identified by the provider session (if any) and the
    client-local pseudo token (if any); the use case resolves the two.
    """

    session: Optional[SessionIdentity] = None
    pseudo_token: Optional[str] = None


class StoryItem(BaseModel):
    """Story in responses."""

    id: str
    title: str
    content: str
    excerpt: str
    tags: list[str]
    author_id: Optional[str]
    author: str
    is_anonymous: bool
    likes: int
    loves: int
    status: Optional[StoryStatus]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_story(cls, story: Story) -> "StoryItem":
        """Build from a Story domain model."""
        return cls(
            id=story.id,
            title=story.title,
            content=story.content,
            excerpt=story.excerpt,
            tags=story.tag_names,
            author_id=story.author_id,
            author=story.author,
            is_anonymous=story.is_anonymous,
            likes=story.likes,
            loves=story.loves,
            status=story.status,
            created_at=story.created_at,
            updated_at=story.updated_at,
        )


class CommentItem(BaseModel):
    """Comment in responses."""

    id: str
    story_id: str
    author_id: Optional[str]
    author: str
    is_anonymous: bool
    content: str
    created_at: Optional[datetime]

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Build from a Comment domain model."""
        return cls(
            id=comment.id,
            story_id=comment.story_id,
            author_id=comment.author_id,
            author=comment.author,
            is_anonymous=comment.is_anonymous,
            content=comment.content,
            created_at=comment.created_at,
        )
