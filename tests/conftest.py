"""Test configuration and helpers."""

from sodfa.domain.model import ResolvedIdentity
from sodfa.domain.value import IdentityClass, OwnerKey

ANONYMOUS_NAME = "زائر مجهول"
FALLBACK_NAME = "زائر"

PSEUDO_TOKEN = "abc123DEF456ghi789JK"

LOST_BOOK_CONTENT = (
    "I lost my favorite book on a train in Cairo, and ten years later "
    "a stranger handed it back to me in a cafe in Lisbon."
)


def authenticated(uid: str = "user-a", name: str | None = "Amira") -> ResolvedIdentity:
    """Resolved identity of a signed-in account."""
    return ResolvedIdentity(
        identity_class=IdentityClass.AUTHENTICATED,
        owner_key=OwnerKey(uid),
        display_name=name or FALLBACK_NAME,
        is_anonymous=False,
    )


def shadow(uid: str = "anon-session-1") -> ResolvedIdentity:
    """Resolved identity of a provider-issued anonymous session."""
    return ResolvedIdentity(
        identity_class=IdentityClass.SHADOW,
        owner_key=OwnerKey(uid),
        display_name=ANONYMOUS_NAME,
        is_anonymous=True,
    )


def pseudo(token: str = PSEUDO_TOKEN) -> ResolvedIdentity:
    """Resolved identity of a client-local pseudo token."""
    return ResolvedIdentity(
        identity_class=IdentityClass.PSEUDO,
        owner_key=OwnerKey(f"client_{token}"),
        display_name=ANONYMOUS_NAME,
        is_anonymous=True,
    )
