"""Get current identity use case."""

from typing import Optional

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import ActorRequest, OperationResponse
from sodfa.domain.error import DomainError
from sodfa.domain.service import IdentityService
from sodfa.domain.value import IdentityClass

from .session import SessionInfo


class GetCurrentIdentityRequest(ActorRequest):
    """Get current identity request."""

    pass


class GetCurrentIdentityResponse(OperationResponse):
    """Resolved identity of the caller."""

    identity_class: Optional[IdentityClass] = None
    owner_key: Optional[str] = None
    display_name: Optional[str] = None
    is_anonymous: Optional[bool] = None
    session: Optional[SessionInfo] = None


class GetCurrentIdentityUseCase(BaseUseCase):
    """Use case for showing who the caller is acting as."""

    def __init__(self, identity_service: IdentityService) -> None:
        self.identity_service = identity_service

    async def execute(
        self, request: GetCurrentIdentityRequest
    ) -> GetCurrentIdentityResponse:
        """Resolve the caller identity.

        Returns an identity_unavailable failure when the caller has neither
        a session nor a pseudo token.
        """
        try:
            identity = self.identity_service.resolve(
                request.session, request.pseudo_token
            )
        except DomainError as e:
            return GetCurrentIdentityResponse.failure(e)

        return GetCurrentIdentityResponse(
            identity_class=identity.identity_class,
            owner_key=identity.owner_key,
            display_name=identity.display_name,
            is_anonymous=identity.is_anonymous,
            session=(
                SessionInfo.from_session(request.session) if request.session else None
            ),
        )
