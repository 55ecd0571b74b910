"""Federated sign-in use case."""

import logfire
from pydantic import BaseModel

from sodfa.application.usecase.base import BaseUseCase
from sodfa.domain.error import DomainError
from sodfa.domain.service import JWTService, SessionService

from .session import SessionInfo, SessionResponse


class FederatedSignInRequest(BaseModel):
    """Federated sign-in request."""

    provider_id: str = "google.com"
    id_token: str  # Token obtained by the client from the provider


class FederatedSignInUseCase(BaseUseCase):
    """Use case for signing in with a federated provider (e.g. Google)."""

    def __init__(self, session_service: SessionService, jwt_service: JWTService) -> None:
        self.session_service = session_service
        self.jwt_service = jwt_service

    async def execute(self, request: FederatedSignInRequest) -> SessionResponse:
        """Exchange the provider token and sign a session token."""
        with logfire.span(
            "federated_sign_in.execute", provider_id=request.provider_id
        ):
            try:
                session = await self.session_service.sign_in_with_federated_provider(
                    request.provider_id, request.id_token
                )
            except DomainError as e:
                return SessionResponse.failure(e)

            return SessionResponse(
                token=self.jwt_service.create_token(session),
                session=SessionInfo.from_session(session),
            )
