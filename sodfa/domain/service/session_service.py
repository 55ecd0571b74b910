"""Session domain service.

Sessions are issued by the external identity provider. Nothing in the
ledgers creates a session implicitly: callers ask for one here before
reacting or commenting.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable

import logfire

from sodfa.adapter.error import IdentityProviderError
from sodfa.domain.error import (
    AuthenticationError,
    DomainError,
    InfrastructureError,
    ValidationError,
)
from sodfa.domain.model.identity import SessionIdentity

from .base import Service

# Identity Toolkit error codes caused by bad input
_VALIDATION_CODES = {
    "EMAIL_EXISTS",
    "INVALID_EMAIL",
    "MISSING_EMAIL",
    "MISSING_PASSWORD",
    "WEAK_PASSWORD",
}

# Identity Toolkit error codes caused by rejected credentials
_CREDENTIAL_CODES = {
    "EMAIL_NOT_FOUND",
    "INVALID_PASSWORD",
    "INVALID_LOGIN_CREDENTIALS",
    "INVALID_IDP_RESPONSE",
    "USER_DISABLED",
}


class IdentityProvider(ABC):
    """External identity provider interface."""

    @abstractmethod
    async def create_ephemeral_session(self) -> SessionIdentity:
        """Create an anonymous session without credentials."""
        pass

    @abstractmethod
    async def sign_in(self, email: str, password: str) -> SessionIdentity:
        """Sign in with email and password."""
        pass

    @abstractmethod
    async def sign_up(
        self, email: str, password: str, display_name: str | None = None
    ) -> SessionIdentity:
        """Create a durable email/password account."""
        pass

    @abstractmethod
    async def sign_in_with_federated_provider(
        self, provider_id: str, id_token: str
    ) -> SessionIdentity:
        """Sign in with a token from a federated provider (e.g. google.com)."""
        pass


def _translate(error: IdentityProviderError) -> DomainError:
    """Map a provider error code to a domain error."""
    if error.code in _VALIDATION_CODES:
        return ValidationError(error.code)
    if error.code in _CREDENTIAL_CODES:
        return AuthenticationError("Invalid credentials", code=error.code)
    return InfrastructureError(f"Identity provider error: {error}")


class SessionService(Service):
    """Domain service for obtaining provider sessions."""

    def __init__(self, identity_provider: IdentityProvider) -> None:
        """Initialize session service.

        Args:
            identity_provider: Identity provider client
        """
        self.identity_provider = identity_provider

    async def _issue(
        self, operation: str, call: Awaitable[SessionIdentity]
    ) -> SessionIdentity:
        try:
            session = await call
        except IdentityProviderError as e:
            logfire.warn(f"{operation} rejected", code=e.code, error=str(e))
            raise _translate(e) from e
        logfire.info(f"{operation} succeeded", uid=session.uid)
        return session

    async def create_ephemeral_session(self) -> SessionIdentity:
        """Create an anonymous (shadow) session.

        Returns:
            Ephemeral session

        Raises:
            InfrastructureError: If the provider is unreachable
        """
        with logfire.span("session_service.create_ephemeral_session"):
            return await self._issue(
                "Ephemeral session", self.identity_provider.create_ephemeral_session()
            )

    async def sign_in(self, email: str, password: str) -> SessionIdentity:
        """Sign in with email and password.

        Args:
            email: Account email
            password: Account password

        Returns:
            Durable session

        Raises:
            AuthenticationError: If the credentials are rejected
            InfrastructureError: If the provider is unreachable
        """
        with logfire.span("session_service.sign_in", email=email):
            return await self._issue(
                "Sign-in", self.identity_provider.sign_in(email, password)
            )

    async def sign_up(
        self, email: str, password: str, display_name: str | None = None
    ) -> SessionIdentity:
        """Create an account.

        Args:
            email: Account email
            password: Account password
            display_name: Name shown on stories and comments

        Returns:
            Durable session for the new account

        Raises:
            ValidationError: If the email is taken or the password is weak
            InfrastructureError: If the provider is unreachable
        """
        with logfire.span("session_service.sign_up", email=email):
            if not email.strip() or not password:
                raise ValidationError("Email and password are required")
            return await self._issue(
                "Sign-up",
                self.identity_provider.sign_up(
                    email.strip(), password, (display_name or "").strip() or None
                ),
            )

    async def sign_in_with_federated_provider(
        self, provider_id: str, id_token: str
    ) -> SessionIdentity:
        """Sign in with a federated provider token.

        Args:
            provider_id: Provider id, e.g. "google.com"
            id_token: Token issued by the provider

        Returns:
            Durable session

        Raises:
            AuthenticationError: If the provider token is rejected
            InfrastructureError: If the provider is unreachable
        """
        with logfire.span(
            "session_service.sign_in_with_federated_provider", provider_id=provider_id
        ):
            return await self._issue(
                "Federated sign-in",
                self.identity_provider.sign_in_with_federated_provider(
                    provider_id, id_token
                ),
            )
