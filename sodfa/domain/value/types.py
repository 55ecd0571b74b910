"""Domain value objects for Sodfa.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from sodfa.domain.value.common import RootValueObject

PSEUDO_TOKEN_LENGTH = 20
PSEUDO_TOKEN_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
)
PSEUDO_OWNER_PREFIX = "client_"


class ReactionType(str, Enum):
    """Kind of reaction a visitor can place on a story."""

    LIKE = "like"
    LOVE = "love"

    @property
    def counter_field(self) -> str:
        """Name of the story counter this reaction contributes to."""
        return "likes" if self is ReactionType.LIKE else "loves"


class StoryStatus(str, Enum):
    """Moderation status of a story. Stories are created as pending."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class IdentityClass(str, Enum):
    """Class of the actor behind a request."""

    AUTHENTICATED = "authenticated"  # Durable account
    SHADOW = "shadow"  # Provider-issued anonymous session
    PSEUDO = "pseudo"  # Client-local random token

    @property
    def is_trackable(self) -> bool:
        """Whether reactions from this identity are stored per owner."""
        match self:
            case IdentityClass.AUTHENTICATED | IdentityClass.SHADOW:
                return True
            case IdentityClass.PSEUDO:
                return False


class StorySortOrder(str, Enum):
    """Sort options for the story listing."""

    LATEST = "latest"
    POPULAR = "popular"
    RANDOM = "random"


class TagName(RootValueObject[str]):
    """Tag attached to a story.

    Tags are free-form words chosen on the share page; they must be
    non-empty and at most 50 characters.
    Examples: 'travel', 'friendship', 'general'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate and normalize tag name."""
        v = v.strip()
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Tag must be 1-50 characters")
        return v


class PseudoToken(RootValueObject[str]):
    """Client-local pseudo identity token.

    Exactly 20 characters drawn from [A-Za-z0-9].
    """

    @field_validator("root")
    @classmethod
    def validate_token_format(cls, v: str) -> str:
        """Validate token length and alphabet."""
        if not re.fullmatch(r"[A-Za-z0-9]{%d}" % PSEUDO_TOKEN_LENGTH, v):
            raise ValueError(
                f"Pseudo token must be {PSEUDO_TOKEN_LENGTH} alphanumeric characters"
            )
        return v

    @property
    def owner_key(self) -> str:
        """Owner key derived from the token."""
        return f"{PSEUDO_OWNER_PREFIX}{self.root}"
