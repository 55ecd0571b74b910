"""Strongly typed identifiers for Sodfa domain entities.

Identifiers are opaque strings assigned by the document store (or, for
reactions, derived from the owner key and story id).
"""

from typing import NewType

StoryId = NewType("StoryId", str)
CommentId = NewType("CommentId", str)
ReactionId = NewType("ReactionId", str)

# Key that owns reactions and stories (account uid, session uid or client_<token>)
OwnerKey = NewType("OwnerKey", str)
