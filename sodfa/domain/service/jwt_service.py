"""JWT token domain service."""

import logfire

from sodfa.config import AuthSettings
from sodfa.domain.model.identity import SessionIdentity
from sodfa.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, session: SessionIdentity) -> str:
        """Create a JWT carrying a provider session.

        Args:
            session: Session issued by the identity provider

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", uid=session.uid):
            token = create_token(
                session.uid,
                self.auth_settings,
                display_name=session.display_name,
                email=session.email,
                is_ephemeral=session.is_ephemeral,
            )
            logfire.info(
                "JWT token created", uid=session.uid, is_ephemeral=session.is_ephemeral
            )
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", uid=payload.uid)
                return payload
            except JWTError as e:
                logfire.error("JWT token verification failed", error=str(e))
                raise

    def get_session_from_token(self, token: str | None) -> SessionIdentity | None:
        """Extract the session from a JWT without raising exceptions.

        Routes use this to optionally authenticate callers without failing
        on invalid tokens.

        Args:
            token: JWT token string (optional)

        Returns:
            Session if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
        except JWTError as e:
            # Invalid or expired token, treat as no session
            logfire.debug("JWT verification failed, treating as no session", error=str(e))
            return None

        return SessionIdentity(
            uid=payload.uid,
            display_name=payload.display_name,
            email=payload.email,
            is_ephemeral=payload.is_ephemeral,
        )
