"""Firebase Auth identity provider.

Talks to the Identity Toolkit REST API, the same backend the Firebase web
SDK uses for anonymous, email/password and federated sign-in.
"""

import secrets
from urllib.parse import urlencode

import httpx
import logfire

from sodfa.adapter.error import IdentityProviderError
from sodfa.domain.model.identity import SessionIdentity
from sodfa.domain.service.session_service import IdentityProvider


class FirebaseIdentityProvider(IdentityProvider):
    """Identity Toolkit REST client."""

    def __init__(self, api_key: str, base_url: str, request_uri: str) -> None:
        """Initialize Firebase identity provider.

        Args:
            api_key: Firebase web API key
            base_url: Identity Toolkit base URL (or auth emulator URL)
            request_uri: Continue URI reported for federated sign-in
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.request_uri = request_uri

    async def _call(self, method: str, payload: dict) -> dict:
        """POST to an Identity Toolkit method.

        Args:
            method: REST method name (e.g. "accounts:signUp")
            payload: JSON body

        Returns:
            Decoded JSON response

        Raises:
            IdentityProviderError: If the provider rejects the request
        """
        url = f"{self.base_url}/{method}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    url,
                    params={"key": self.api_key},
                    json=payload,
                    timeout=30.0,
                )
        except httpx.HTTPError as e:
            logfire.error("Identity Toolkit HTTP error", method=method, error=str(e))
            raise IdentityProviderError(f"HTTP error calling {method}: {e}")

        if response.status_code != 200:
            # Errors look like {"error": {"code": 400, "message": "WEAK_PASSWORD : ..."}}
            try:
                code = response.json()["error"]["message"].split(" ")[0]
            except (ValueError, KeyError, TypeError):
                code = None
            logfire.error(
                "Identity Toolkit request failed",
                method=method,
                status_code=response.status_code,
                code=code,
            )
            raise IdentityProviderError(
                f"{method} failed: {code or response.status_code}", code=code
            )

        return response.json()

    async def create_ephemeral_session(self) -> SessionIdentity:
        """Create an anonymous account (no credentials)."""
        result = await self._call("accounts:signUp", {"returnSecureToken": True})
        logfire.info("Anonymous session created", uid=result["localId"])
        return SessionIdentity(uid=result["localId"], is_ephemeral=True)

    async def sign_in(self, email: str, password: str) -> SessionIdentity:
        """Sign in with email and password."""
        result = await self._call(
            "accounts:signInWithPassword",
            {"email": email, "password": password, "returnSecureToken": True},
        )
        logfire.info("Email sign-in succeeded", uid=result["localId"])
        return SessionIdentity(
            uid=result["localId"],
            email=result.get("email"),
            display_name=result.get("displayName") or None,
        )

    async def sign_up(
        self, email: str, password: str, display_name: str | None = None
    ) -> SessionIdentity:
        """Create an email/password account and set its display name."""
        result = await self._call(
            "accounts:signUp",
            {"email": email, "password": password, "returnSecureToken": True},
        )

        if display_name:
            await self._call(
                "accounts:update",
                {
                    "idToken": result["idToken"],
                    "displayName": display_name,
                    "returnSecureToken": False,
                },
            )

        logfire.info("Account created", uid=result["localId"])
        return SessionIdentity(
            uid=result["localId"],
            email=result.get("email", email),
            display_name=display_name or None,
        )

    async def sign_in_with_federated_provider(
        self, provider_id: str, id_token: str
    ) -> SessionIdentity:
        """Exchange a federated id token (e.g. Google) for a session."""
        result = await self._call(
            "accounts:signInWithIdp",
            {
                "postBody": urlencode({"id_token": id_token, "providerId": provider_id}),
                "requestUri": self.request_uri,
                "returnSecureToken": True,
                "returnIdpCredential": True,
            },
        )
        logfire.info(
            "Federated sign-in succeeded",
            uid=result["localId"],
            provider_id=provider_id,
        )
        return SessionIdentity(
            uid=result["localId"],
            email=result.get("email"),
            display_name=result.get("displayName") or None,
        )


class MockIdentityProvider(IdentityProvider):
    """In-memory identity provider for testing.

    Accounts live in a dict keyed by email; uids are random 28-character
    strings like the ones Firebase issues.
    """

    def __init__(self) -> None:
        """Initialize mock provider without real configuration."""
        self._accounts: dict[str, tuple[str, str, str | None]] = {}

    @staticmethod
    def _new_uid() -> str:
        return secrets.token_urlsafe(21)[:28]

    async def create_ephemeral_session(self) -> SessionIdentity:
        """Return a fresh anonymous session."""
        return SessionIdentity(uid=self._new_uid(), is_ephemeral=True)

    async def sign_in(self, email: str, password: str) -> SessionIdentity:
        """Sign in against the in-memory accounts."""
        account = self._accounts.get(email)
        if account is None or account[1] != password:
            raise IdentityProviderError("sign_in failed", code="INVALID_LOGIN_CREDENTIALS")
        uid, _, display_name = account
        return SessionIdentity(uid=uid, email=email, display_name=display_name)

    async def sign_up(
        self, email: str, password: str, display_name: str | None = None
    ) -> SessionIdentity:
        """Register an in-memory account."""
        if email in self._accounts:
            raise IdentityProviderError("sign_up failed", code="EMAIL_EXISTS")
        uid = self._new_uid()
        self._accounts[email] = (uid, password, display_name or None)
        return SessionIdentity(uid=uid, email=email, display_name=display_name or None)

    async def sign_in_with_federated_provider(
        self, provider_id: str, id_token: str
    ) -> SessionIdentity:
        """Return a deterministic federated account for the token."""
        return SessionIdentity(
            uid=f"{provider_id}:{id_token}"[:28],
            email="mock@example.com",
            display_name="Mock Federated User",
        )
