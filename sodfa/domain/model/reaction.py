"""Reaction entity.

A reaction is the like or love mark an identity placed on a story.
"""

from datetime import datetime
from typing import Optional

from sodfa.domain.model.common import DomainModel
from sodfa.domain.value import OwnerKey, ReactionId, ReactionType, StoryId


def reaction_id_for(owner_key: str, story_id: str) -> ReactionId:
    """Deterministic reaction document id for an (owner, story) pair."""
    return ReactionId(f"{owner_key}_{story_id}")


class Reaction(DomainModel):
    """Reaction entity.

    Business rules:
    - At most one reaction per (owner, story), enforced by the document id
    - Changing type replaces the row in place
    - Never stored for pseudo identities
    """

    id: ReactionId
    user_id: OwnerKey
    story_id: StoryId
    type: ReactionType
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
