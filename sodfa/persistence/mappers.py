"""Mappers for converting between store documents and domain models.

Documents keep the camelCase field names used by the web frontend, so the
same collections can be read by both. The frontend writes them directly,
so reading is lenient: out-of-range values are clamped or defaulted, and
only a document that cannot describe a model at all raises
``DocumentMappingError``.
"""

from typing import Any, Callable, Dict, Optional, TypeVar

from sodfa.adapter.store import SERVER_TIMESTAMP, StoredDocument
from sodfa.domain.model import Comment, Reaction, Story
from sodfa.domain.value import (
    CommentId,
    OwnerKey,
    ReactionId,
    ReactionType,
    StoryId,
    StoryStatus,
    TagName,
)

STORIES = "stories"
COMMENTS = "comments"
REACTIONS = "reactions"

# Documents written before tags were required have none
_LEGACY_TAG = "general"

_MAX_TAG_LENGTH = 50

ModelT = TypeVar("ModelT")


class DocumentMappingError(Exception):
    """Stored document cannot be converted to a domain model."""

    def __init__(self, collection: str, doc_id: str, reason: str):
        self.collection = collection
        self.doc_id = doc_id
        super().__init__(f"Malformed {collection} document {doc_id}: {reason}")


def _mapped(
    collection: str, doc: StoredDocument, build: Callable[[], ModelT]
) -> ModelT:
    # pydantic's ValidationError is a ValueError
    try:
        return build()
    except (KeyError, TypeError, ValueError) as e:
        raise DocumentMappingError(collection, doc.id, str(e)) from e


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _counter(value: Any) -> int:
    try:
        return max(int(value or 0), 0)
    except (TypeError, ValueError):
        return 0


def _tags(value: Any) -> list[TagName]:
    names: list[str] = []
    for raw in value if isinstance(value, list) else []:
        name = str(raw).strip()
        if 0 < len(name) <= _MAX_TAG_LENGTH and name not in names:
            names.append(name)
    return [TagName(name) for name in names or [_LEGACY_TAG]]


def _owner(value: Any) -> Optional[OwnerKey]:
    return OwnerKey(value) if isinstance(value, str) and value else None


def doc_to_story(doc: StoredDocument) -> Story:
    """Convert a story document to a Story domain model.

    Args:
        doc: Stored document

    Returns:
        Story domain model

    Raises:
        DocumentMappingError: If the status is unknown or a timestamp is
            not a date
    """
    data = doc.data
    status = data.get("status")

    return _mapped(
        STORIES,
        doc,
        lambda: Story(
            id=StoryId(doc.id),
            title=_text(data.get("title")),
            content=_text(data.get("content")),
            excerpt=_text(data.get("excerpt")),
            tags=_tags(data.get("tags")),
            author_id=_owner(data.get("authorId")),
            author=_text(data.get("author")),
            is_anonymous=bool(data.get("isAnonymous", False)),
            likes=_counter(data.get("likes")),
            loves=_counter(data.get("loves")),
            status=StoryStatus(status) if status else None,
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        ),
    )


def story_to_document(story: Story) -> Dict[str, Any]:
    """Convert a new Story to document fields with server timestamps.

    Args:
        story: Story domain model

    Returns:
        Dict suitable for document creation
    """
    return {
        "title": story.title,
        "content": story.content,
        "excerpt": story.excerpt,
        "tags": story.tag_names,
        "authorId": story.author_id,
        "author": story.author,
        "isAnonymous": story.is_anonymous,
        "likes": story.likes,
        "loves": story.loves,
        "status": story.status.value if story.status else None,
        "createdAt": SERVER_TIMESTAMP,
        "updatedAt": SERVER_TIMESTAMP,
    }


def doc_to_comment(doc: StoredDocument) -> Comment:
    """Convert a comment document to a Comment domain model.

    Raises:
        DocumentMappingError: If the document has no story id
    """
    data = doc.data
    return _mapped(
        COMMENTS,
        doc,
        lambda: Comment(
            id=CommentId(doc.id),
            story_id=StoryId(data["storyId"]),
            author_id=_owner(data.get("authorId")),
            author=_text(data.get("author")),
            is_anonymous=bool(data.get("isAnonymous", False)),
            content=_text(data.get("content")),
            created_at=data.get("createdAt"),
        ),
    )


def comment_to_document(comment: Comment) -> Dict[str, Any]:
    """Convert a new Comment to document fields."""
    return {
        "storyId": comment.story_id,
        "authorId": comment.author_id,
        "author": comment.author,
        "isAnonymous": comment.is_anonymous,
        "content": comment.content,
        "createdAt": SERVER_TIMESTAMP,
    }


def doc_to_reaction(doc: StoredDocument) -> Reaction:
    """Convert a reaction document to a Reaction domain model.

    Raises:
        DocumentMappingError: If owner, story or a known type is missing
    """
    data = doc.data
    return _mapped(
        REACTIONS,
        doc,
        lambda: Reaction(
            id=ReactionId(doc.id),
            user_id=OwnerKey(data["userId"]),
            story_id=StoryId(data["storyId"]),
            type=ReactionType(data["type"]),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        ),
    )


def reaction_to_document(reaction: Reaction) -> Dict[str, Any]:
    """Convert a new Reaction to document fields."""
    return {
        "userId": reaction.user_id,
        "storyId": reaction.story_id,
        "type": reaction.type.value,
        "createdAt": SERVER_TIMESTAMP,
        "updatedAt": SERVER_TIMESTAMP,
    }
