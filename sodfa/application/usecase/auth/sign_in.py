"""Sign-in use case."""

import logfire
from pydantic import BaseModel

from sodfa.application.usecase.base import BaseUseCase
from sodfa.domain.error import DomainError
from sodfa.domain.service import JWTService, SessionService

from .session import SessionInfo, SessionResponse


class SignInRequest(BaseModel):
    """Email/password sign-in request."""

    email: str
    password: str


class SignInUseCase(BaseUseCase):
    """Use case for email/password sign-in."""

    def __init__(self, session_service: SessionService, jwt_service: JWTService) -> None:
        self.session_service = session_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignInRequest) -> SessionResponse:
        """Sign in and sign a session token."""
        with logfire.span("sign_in.execute", email=request.email):
            try:
                session = await self.session_service.sign_in(
                    request.email, request.password
                )
            except DomainError as e:
                return SessionResponse.failure(e)

            return SessionResponse(
                token=self.jwt_service.create_token(session),
                session=SessionInfo.from_session(session),
            )
