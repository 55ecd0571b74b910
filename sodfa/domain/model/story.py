"""Story aggregate root.

A story is a short coincidence narrative submitted by a visitor. It carries
the like/love counters that reactions update.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from sodfa.domain.model.common import DomainModel
from sodfa.domain.value import OwnerKey, StoryId, StoryStatus, TagName


def make_excerpt(content: str, length: int = 150) -> str:
    """Derive the listing excerpt from the story body.

    Args:
        content: Story body
        length: Maximum number of characters kept

    Returns:
        First ``length`` characters, with "..." appended when truncated
    """
    if len(content) > length:
        return content[:length] + "..."
    return content


class Story(DomainModel):
    """Story aggregate root.

    Business rules:
    - Counters are never negative (clamped at 0 on decrement)
    - At least one tag (defaults to "general" on submission)
    - Created as pending, never auto-approved
    - author_id is None for stories submitted under a pseudo identity

    Length limits on title and content are checked on submission, not
    here, so documents written by other clients still load.
    """

    id: StoryId
    title: str
    content: str
    excerpt: str = ""
    tags: list[TagName] = Field(min_length=1)
    author_id: Optional[OwnerKey] = None
    author: str
    is_anonymous: bool = False
    likes: int = Field(default=0, ge=0)
    loves: int = Field(default=0, ge=0)
    status: Optional[StoryStatus] = StoryStatus.PENDING
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def tag_names(self) -> list[str]:
        """Tags as plain strings."""
        return [tag.root for tag in self.tags]
