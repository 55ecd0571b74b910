"""HTTP client for the Sodfa API."""

from typing import Any, Optional

import httpx

from sodfa.application.usecase.auth import GetCurrentIdentityResponse, SessionResponse
from sodfa.application.usecase.comment import AddCommentResponse, ListCommentsResponse
from sodfa.application.usecase.reaction import GetReactionResponse, ReactResponse
from sodfa.application.usecase.story import (
    CreateStoryResponse,
    DeleteStoryResponse,
    GetStoryResponse,
    ListAuthorStoriesResponse,
    ListStoriesResponse,
    ListTagsResponse,
    UpdateStoryResponse,
)
from sodfa.client.pseudo_identity import FileStorage, PseudoIdentityProvider
from sodfa.config import Settings
from sodfa.domain.value import ReactionType, StorySortOrder
from sodfa.util.logging import get_logger

CLIENT_ID_HEADER = "X-Client-Id"

logger = get_logger(__name__)


class SodfaAPIError(Exception):
    """API request failed.

    Attributes:
        status_code: HTTP status (None for transport failures)
        kind: Failure kind reported by the API (e.g. "identity_unavailable")
    """

    def __init__(
        self, message: str, status_code: int | None = None, kind: str | None = None
    ):
        self.status_code = status_code
        self.kind = kind
        super().__init__(message)


def _error_from_response(response: httpx.Response) -> SodfaAPIError:
    kind = None
    message = f"HTTP {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None

    if isinstance(detail, dict):
        kind = detail.get("kind")
        message = detail.get("message", message)
    elif isinstance(detail, str):
        message = detail

    return SodfaAPIError(message, status_code=response.status_code, kind=kind)


class SodfaClient:
    """Async client for the Sodfa API.

    The session cookie set by the auth endpoints is kept in the underlying
    ``httpx.AsyncClient`` cookie jar. When a pseudo identity provider is
    given, its token is sent in the ``X-Client-Id`` header on every request.

    Example:
        async with SodfaClient("http://localhost:8000", pseudo) as client:
            page = await client.list_stories(tag="travel")
    """

    def __init__(
        self,
        base_url: str,
        pseudo_identity: PseudoIdentityProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize client.

        Args:
            base_url: API base URL
            pseudo_identity: Source of the client-local pseudo token
            transport: Optional httpx transport (e.g. ``httpx.ASGITransport``)
            timeout: Request timeout in seconds
        """
        self.pseudo_identity = pseudo_identity
        self._http = httpx.AsyncClient(
            base_url=base_url, transport=transport, timeout=timeout
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SodfaClient":
        """Client for the configured API with a file-backed pseudo identity."""
        storage = FileStorage(settings.client.storage_path)
        return cls(settings.client.api_base_url, PseudoIdentityProvider(storage))

    async def __aenter__(self) -> "SodfaClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        if self.pseudo_identity is None:
            return {}
        token = self.pseudo_identity.get_or_create_id()
        return {CLIENT_ID_HEADER: token} if token else {}

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._http.request(
                method, path, headers=self._headers(), **kwargs
            )
        except httpx.HTTPError as e:
            logger.error(f"Request failed: {method} {path}: {e}")
            raise SodfaAPIError(str(e)) from e

        if response.is_error:
            error = _error_from_response(response)
            logger.warning(
                f"API error: {method} {path} -> {response.status_code} ({error.kind})"
            )
            raise error
        return response.json()

    # Sessions

    async def create_anonymous_session(self) -> SessionResponse:
        """Start a shadow session."""
        return SessionResponse.model_validate(
            await self._request("POST", "/auth/anonymous")
        )

    async def sign_up(
        self, email: str, password: str, display_name: str | None = None
    ) -> SessionResponse:
        """Create an account and start its session."""
        return SessionResponse.model_validate(
            await self._request(
                "POST",
                "/auth/signup",
                json={"email": email, "password": password, "display_name": display_name},
            )
        )

    async def sign_in(self, email: str, password: str) -> SessionResponse:
        """Sign in with email and password."""
        return SessionResponse.model_validate(
            await self._request(
                "POST", "/auth/login", json={"email": email, "password": password}
            )
        )

    async def sign_in_with_federated_provider(
        self, id_token: str, provider_id: str = "google.com"
    ) -> SessionResponse:
        """Sign in with a federated provider id token."""
        return SessionResponse.model_validate(
            await self._request(
                "POST",
                "/auth/federated",
                json={"provider_id": provider_id, "id_token": id_token},
            )
        )

    async def sign_out(self) -> None:
        """End the session and drop the cookie."""
        await self._request("POST", "/auth/logout")
        self._http.cookies.clear()

    async def me(self) -> GetCurrentIdentityResponse:
        """Identity the server resolves for this client."""
        return GetCurrentIdentityResponse.model_validate(
            await self._request("GET", "/auth/me")
        )

    # Stories

    async def create_story(
        self,
        title: str,
        content: str,
        tags: list[str] | None = None,
        author_name: str | None = None,
        is_anonymous: bool = False,
    ) -> CreateStoryResponse:
        """Submit a story."""
        return CreateStoryResponse.model_validate(
            await self._request(
                "POST",
                "/stories",
                json={
                    "title": title,
                    "content": content,
                    "tags": tags or [],
                    "author_name": author_name,
                    "is_anonymous": is_anonymous,
                },
            )
        )

    async def list_stories(
        self,
        tag: Optional[str] = None,
        sort: StorySortOrder = StorySortOrder.LATEST,
        page: int = 1,
        per_page: Optional[int] = None,
    ) -> ListStoriesResponse:
        """Browse stories."""
        params: dict[str, Any] = {"sort": sort.value, "page": page}
        if tag:
            params["tag"] = tag
        if per_page:
            params["per_page"] = per_page
        return ListStoriesResponse.model_validate(
            await self._request("GET", "/stories", params=params)
        )

    async def list_tags(self) -> ListTagsResponse:
        """Tag cloud."""
        return ListTagsResponse.model_validate(
            await self._request("GET", "/stories/tags")
        )

    async def get_story(self, story_id: str) -> GetStoryResponse:
        """Fetch one story."""
        return GetStoryResponse.model_validate(
            await self._request("GET", f"/stories/{story_id}")
        )

    async def update_story(self, story_id: str, **changes: Any) -> UpdateStoryResponse:
        """Edit title, content or tags of an own story."""
        return UpdateStoryResponse.model_validate(
            await self._request("PATCH", f"/stories/{story_id}", json=changes)
        )

    async def delete_story(self, story_id: str) -> DeleteStoryResponse:
        """Delete a story with its comments and reactions."""
        return DeleteStoryResponse.model_validate(
            await self._request("DELETE", f"/stories/{story_id}")
        )

    async def list_author_stories(self, author_id: str) -> ListAuthorStoriesResponse:
        """Stories of an account."""
        return ListAuthorStoriesResponse.model_validate(
            await self._request("GET", f"/users/{author_id}/stories")
        )

    # Reactions and comments

    async def react(self, story_id: str, type: ReactionType) -> ReactResponse:
        """Like or love a story."""
        return ReactResponse.model_validate(
            await self._request(
                "POST", f"/stories/{story_id}/reactions", json={"type": type.value}
            )
        )

    async def get_my_reaction(self, story_id: str) -> GetReactionResponse:
        """Own current reaction on a story."""
        return GetReactionResponse.model_validate(
            await self._request("GET", f"/stories/{story_id}/reactions/me")
        )

    async def add_comment(self, story_id: str, text: str) -> AddCommentResponse:
        """Comment on a story."""
        return AddCommentResponse.model_validate(
            await self._request(
                "POST", f"/stories/{story_id}/comments", json={"text": text}
            )
        )

    async def list_comments(
        self, story_id: str, limit: Optional[int] = None
    ) -> ListCommentsResponse:
        """Comments on a story, newest first."""
        params = {"limit": limit} if limit else None
        return ListCommentsResponse.model_validate(
            await self._request("GET", f"/stories/{story_id}/comments", params=params)
        )
