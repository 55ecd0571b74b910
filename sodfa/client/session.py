"""Client-side session state."""

from collections.abc import Callable
from typing import Optional

from sodfa.application.usecase.auth import SessionInfo, SessionResponse
from sodfa.client.api_client import SodfaClient
from sodfa.util.logging import get_logger

SessionListener = Callable[[Optional[SessionInfo]], None]

logger = get_logger(__name__)


class ClientSession:
    """Tracks the signed-in session of a client and notifies listeners.

    Listeners fire on every transition (sign-in, sign-up, anonymous
    sign-in, sign-out, refresh) with the new session or None.
    """

    def __init__(self, client: SodfaClient) -> None:
        self.client = client
        self.current: Optional[SessionInfo] = None
        self._listeners: list[SessionListener] = []

    def current_session_changed(
        self, listener: SessionListener
    ) -> Callable[[], None]:
        """Subscribe to session transitions.

        The listener is called once right away with the current session.

        Returns:
            Function that unsubscribes the listener
        """
        self._listeners.append(listener)
        listener(self.current)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _transition(self, session: Optional[SessionInfo]) -> None:
        self.current = session
        for listener in list(self._listeners):
            listener(session)

    def _from_response(self, response: SessionResponse) -> Optional[SessionInfo]:
        self._transition(response.session)
        return response.session

    @property
    def is_authenticated(self) -> bool:
        """Whether a durable (non-anonymous) account is signed in."""
        return self.current is not None and not self.current.is_ephemeral

    async def sign_in_anonymously(self) -> Optional[SessionInfo]:
        """Start a shadow session."""
        return self._from_response(await self.client.create_anonymous_session())

    async def sign_in(self, email: str, password: str) -> Optional[SessionInfo]:
        """Sign in with email and password."""
        return self._from_response(await self.client.sign_in(email, password))

    async def sign_up(
        self, email: str, password: str, display_name: str | None = None
    ) -> Optional[SessionInfo]:
        """Create an account and sign in."""
        return self._from_response(
            await self.client.sign_up(email, password, display_name)
        )

    async def sign_in_with_federated_provider(
        self, id_token: str, provider_id: str = "google.com"
    ) -> Optional[SessionInfo]:
        """Sign in with a federated provider token."""
        return self._from_response(
            await self.client.sign_in_with_federated_provider(id_token, provider_id)
        )

    async def sign_out(self) -> None:
        """Sign out. The pseudo identity is kept."""
        await self.client.sign_out()
        self._transition(None)

    async def refresh(self) -> Optional[SessionInfo]:
        """Re-read the session from the server."""
        result = await self.client.me()
        if not result.success:
            logger.debug(f"No server identity: {result.error}")
        self._transition(result.session)
        return result.session
