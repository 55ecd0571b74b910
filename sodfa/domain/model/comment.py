"""Comment entity.

Comments are flat, append-only remarks on a story. They are never edited
and are removed only when their story is deleted.
"""

from datetime import datetime
from typing import Optional

from sodfa.domain.model.common import DomainModel
from sodfa.domain.value import CommentId, OwnerKey, StoryId


class Comment(DomainModel):
    """Comment entity.

    Attribution follows the resolved identity of the commenter:
    author_id is only set for authenticated accounts.
    """

    id: CommentId
    story_id: StoryId
    author_id: Optional[OwnerKey] = None
    author: str
    is_anonymous: bool = False
    content: str
    created_at: Optional[datetime] = None
