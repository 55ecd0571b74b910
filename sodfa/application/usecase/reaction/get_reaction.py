"""Get current reaction use case."""

from typing import Optional

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import ActorRequest, OperationResponse
from sodfa.domain.error import DomainError
from sodfa.domain.service import IdentityService, ReactionService
from sodfa.domain.value import ReactionType, StoryId


class GetReactionRequest(ActorRequest):
    """Get reaction request."""

    story_id: str


class GetReactionResponse(OperationResponse):
    """Get reaction response."""

    reacted: bool = False
    type: Optional[ReactionType] = None


class GetReactionUseCase(BaseUseCase):
    """Use case for showing the actor's reaction on a story page."""

    def __init__(
        self, identity_service: IdentityService, reaction_service: ReactionService
    ) -> None:
        self.identity_service = identity_service
        self.reaction_service = reaction_service

    async def execute(self, request: GetReactionRequest) -> GetReactionResponse:
        """Look up the actor's reaction."""
        try:
            identity = self.identity_service.resolve(
                request.session, request.pseudo_token
            )
            outcome = await self.reaction_service.get_reaction(
                StoryId(request.story_id), identity
            )
        except DomainError as e:
            return GetReactionResponse.failure(e)
        return GetReactionResponse(reacted=outcome.reacted, type=outcome.type)
