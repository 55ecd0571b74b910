"""Domain model entities for Sodfa."""

from sodfa.domain.model.comment import Comment
from sodfa.domain.model.identity import ResolvedIdentity, SessionIdentity
from sodfa.domain.model.reaction import Reaction, reaction_id_for
from sodfa.domain.model.story import Story, make_excerpt

__all__ = [
    "Story",
    "Comment",
    "Reaction",
    "ResolvedIdentity",
    "SessionIdentity",
    "make_excerpt",
    "reaction_id_for",
]
