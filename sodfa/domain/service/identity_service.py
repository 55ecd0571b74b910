"""Identity resolution domain service."""

from typing import Optional

import logfire

from sodfa.config import StorySettings
from sodfa.domain.error import IdentityUnavailableError
from sodfa.domain.model.identity import ResolvedIdentity, SessionIdentity
from sodfa.domain.value import PSEUDO_OWNER_PREFIX, IdentityClass, OwnerKey

from .base import Service


def classify(
    session: Optional[SessionIdentity], pseudo_token: Optional[str]
) -> Optional[IdentityClass]:
    """Decide which identity class applies to an actor.

    Order: durable session, then pseudo token, then ephemeral session. A
    pseudo token wins over an ephemeral session so attribution stays stable
    when the provider rotates anonymous sessions.

    Args:
        session: Session issued by the identity provider, if any
        pseudo_token: Client-local pseudo identity token, if any

    Returns:
        The identity class, or None when no identity is available
    """
    if session is not None and not session.is_ephemeral:
        return IdentityClass.AUTHENTICATED
    if pseudo_token:
        return IdentityClass.PSEUDO
    if session is not None:
        return IdentityClass.SHADOW
    return None


class IdentityService(Service):
    """Resolves the actor identity used for attribution and ownership."""

    def __init__(self, story_settings: StorySettings) -> None:
        """Initialize identity service.

        Args:
            story_settings: Provides the display name literals
        """
        self.story_settings = story_settings

    def resolve(
        self, session: Optional[SessionIdentity], pseudo_token: Optional[str]
    ) -> ResolvedIdentity:
        """Resolve the identity of the current actor.

        Args:
            session: Session issued by the identity provider, if any
            pseudo_token: Client-local pseudo identity token, if any

        Returns:
            Resolved identity

        Raises:
            IdentityUnavailableError: If neither a session nor a pseudo token
                is present
        """
        pseudo_token = (pseudo_token or "").strip() or None
        identity_class = classify(session, pseudo_token)

        match identity_class:
            case IdentityClass.AUTHENTICATED:
                assert session is not None
                return ResolvedIdentity(
                    identity_class=identity_class,
                    owner_key=OwnerKey(session.uid),
                    display_name=session.display_name
                    or self.story_settings.fallback_display_name,
                    is_anonymous=False,
                )
            case IdentityClass.PSEUDO:
                return ResolvedIdentity(
                    identity_class=identity_class,
                    owner_key=OwnerKey(f"{PSEUDO_OWNER_PREFIX}{pseudo_token}"),
                    display_name=self.story_settings.anonymous_display_name,
                    is_anonymous=True,
                )
            case IdentityClass.SHADOW:
                assert session is not None
                return ResolvedIdentity(
                    identity_class=identity_class,
                    owner_key=OwnerKey(session.uid),
                    display_name=self.story_settings.anonymous_display_name,
                    is_anonymous=True,
                )
            case None:
                logfire.warn("No identity available for request")
                raise IdentityUnavailableError()
