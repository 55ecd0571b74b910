"""Update story use case."""

from typing import Optional

import logfire

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import (
    ActorRequest,
    OperationResponse,
    StoryItem,
)
from sodfa.domain.error import DomainError
from sodfa.domain.service import IdentityService, StoryService
from sodfa.domain.value import StoryId


class UpdateStoryRequest(ActorRequest):
    """Update story request. Fields left as None are unchanged."""

    story_id: str
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[list[str]] = None


class UpdateStoryResponse(OperationResponse):
    """Update story response."""

    story: Optional[StoryItem] = None


class UpdateStoryUseCase(BaseUseCase):
    """Use case for an author editing their story."""

    def __init__(
        self, identity_service: IdentityService, story_service: StoryService
    ) -> None:
        """Initialize update story use case.

        Args:
            identity_service: Identity resolution service
            story_service: Story domain service
        """
        self.identity_service = identity_service
        self.story_service = story_service

    async def execute(self, request: UpdateStoryRequest) -> UpdateStoryResponse:
        """Execute update story flow.

        Args:
            request: Update story request

        Returns:
            Updated story, or a structured failure
        """
        with logfire.span("update_story.execute", story_id=request.story_id):
            try:
                identity = self.identity_service.resolve(
                    request.session, request.pseudo_token
                )
                story = await self.story_service.update_story(
                    StoryId(request.story_id),
                    identity,
                    title=request.title,
                    content=request.content,
                    tags=request.tags,
                )
            except DomainError as e:
                return UpdateStoryResponse.failure(e)

            return UpdateStoryResponse(story=StoryItem.from_story(story))
