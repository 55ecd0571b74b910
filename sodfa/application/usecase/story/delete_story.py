"""Delete story use case."""

import logfire

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import ActorRequest, OperationResponse
from sodfa.domain.error import DomainError
from sodfa.domain.service import IdentityService, StoryService
from sodfa.domain.value import StoryId


class DeleteStoryRequest(ActorRequest):
    """Delete story request."""

    story_id: str


class DeleteStoryResponse(OperationResponse):
    """Delete story response."""

    pass


class DeleteStoryUseCase(BaseUseCase):
    """Use case for deleting a story and everything attached to it."""

    def __init__(
        self, identity_service: IdentityService, story_service: StoryService
    ) -> None:
        """Initialize delete story use case.

        Args:
            identity_service: Identity resolution service
            story_service: Story domain service
        """
        self.identity_service = identity_service
        self.story_service = story_service

    async def execute(self, request: DeleteStoryRequest) -> DeleteStoryResponse:
        """Execute delete story flow.

        Args:
            request: Delete story request

        Returns:
            Success, or a structured failure (unauthorized leaves the story
            and its comments and reactions untouched)
        """
        with logfire.span("delete_story.execute", story_id=request.story_id):
            try:
                identity = self.identity_service.resolve(
                    request.session, request.pseudo_token
                )
                await self.story_service.delete_story(
                    StoryId(request.story_id), identity
                )
            except DomainError as e:
                return DeleteStoryResponse.failure(e)

            return DeleteStoryResponse()
