"""React to story use case."""

from typing import Optional

import logfire

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import ActorRequest, OperationResponse
from sodfa.domain.error import DomainError
from sodfa.domain.service import IdentityService, ReactionService
from sodfa.domain.value import ReactionType, StoryId


class ReactRequest(ActorRequest):
    """React request."""

    story_id: str
    type: ReactionType


class ReactResponse(OperationResponse):
    """React response.

    ``reacted`` is False after a toggle-off, in which case ``type`` is None.
    """

    reacted: bool = False
    type: Optional[ReactionType] = None


class ReactUseCase(BaseUseCase):
    """Use case for liking or loving a story."""

    def __init__(
        self, identity_service: IdentityService, reaction_service: ReactionService
    ) -> None:
        """Initialize react use case.

        Args:
            identity_service: Identity resolution service
            reaction_service: Reaction ledger
        """
        self.identity_service = identity_service
        self.reaction_service = reaction_service

    async def execute(self, request: ReactRequest) -> ReactResponse:
        """Execute react flow.

        Args:
            request: React request

        Returns:
            Reaction outcome, or a structured failure
        """
        with logfire.span(
            "react.execute", story_id=request.story_id, type=request.type.value
        ):
            try:
                identity = self.identity_service.resolve(
                    request.session, request.pseudo_token
                )
                outcome = await self.reaction_service.react(
                    StoryId(request.story_id), request.type, identity
                )
            except DomainError as e:
                logfire.warn("Reaction failed", story_id=request.story_id, error=str(e))
                return ReactResponse.failure(e)

            return ReactResponse(reacted=outcome.reacted, type=outcome.type)
