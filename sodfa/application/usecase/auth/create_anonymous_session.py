"""Create anonymous session use case."""

import logfire
from pydantic import BaseModel

from sodfa.application.usecase.base import BaseUseCase
from sodfa.domain.error import DomainError
from sodfa.domain.service import JWTService, SessionService

from .session import SessionInfo, SessionResponse


class CreateAnonymousSessionRequest(BaseModel):
    """Anonymous session request (no credentials)."""

    pass


class CreateAnonymousSessionUseCase(BaseUseCase):
    """Use case for explicitly obtaining a shadow session.

    Clients call this before reacting or commenting when they have neither
    an account session nor a pseudo token.
    """

    def __init__(self, session_service: SessionService, jwt_service: JWTService) -> None:
        """Initialize use case.

        Args:
            session_service: Session domain service
            jwt_service: JWT token domain service
        """
        self.session_service = session_service
        self.jwt_service = jwt_service

    async def execute(self, request: CreateAnonymousSessionRequest) -> SessionResponse:
        """Create an ephemeral session and sign a token for it."""
        with logfire.span("create_anonymous_session.execute"):
            try:
                session = await self.session_service.create_ephemeral_session()
            except DomainError as e:
                return SessionResponse.failure(e)

            return SessionResponse(
                token=self.jwt_service.create_token(session),
                session=SessionInfo.from_session(session),
            )
