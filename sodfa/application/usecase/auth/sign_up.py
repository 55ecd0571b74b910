"""Sign-up use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from sodfa.application.usecase.base import BaseUseCase
from sodfa.domain.error import DomainError
from sodfa.domain.service import JWTService, SessionService

from .session import SessionInfo, SessionResponse


class SignUpRequest(BaseModel):
    """Sign-up request."""

    email: str
    password: str
    display_name: Optional[str] = None


class SignUpUseCase(BaseUseCase):
    """Use case for creating an email/password account."""

    def __init__(self, session_service: SessionService, jwt_service: JWTService) -> None:
        """Initialize sign-up use case.

        Args:
            session_service: Session domain service
            jwt_service: JWT token domain service
        """
        self.session_service = session_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignUpRequest) -> SessionResponse:
        """Create the account and sign a session token.

        Args:
            request: Sign-up request

        Returns:
            Session response, or a validation failure (e.g. EMAIL_EXISTS)
        """
        with logfire.span("sign_up.execute", email=request.email):
            try:
                session = await self.session_service.sign_up(
                    request.email, request.password, request.display_name
                )
            except DomainError as e:
                return SessionResponse.failure(e)

            return SessionResponse(
                token=self.jwt_service.create_token(session),
                session=SessionInfo.from_session(session),
            )
