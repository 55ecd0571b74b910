"""Create story use case."""

from typing import Optional

import logfire
from pydantic import Field

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import (
    ActorRequest,
    OperationResponse,
    StoryItem,
)
from sodfa.domain.error import DomainError
from sodfa.domain.service import IdentityService, StoryService


class CreateStoryRequest(ActorRequest):
    """Create story request (share page form)."""

    title: str
    content: str
    tags: list[str] = Field(default_factory=list)
    author_name: Optional[str] = None
    is_anonymous: bool = False


class CreateStoryResponse(OperationResponse):
    """Create story response."""

    story: Optional[StoryItem] = None


class CreateStoryUseCase(BaseUseCase):
    """Use case for submitting a story."""

    def __init__(
        self, identity_service: IdentityService, story_service: StoryService
    ) -> None:
        """Initialize create story use case.

        Args:
            identity_service: Identity resolution service
            story_service: Story domain service
        """
        self.identity_service = identity_service
        self.story_service = story_service

    async def execute(self, request: CreateStoryRequest) -> CreateStoryResponse:
        """Execute create story flow.

        Args:
            request: Create story request

        Returns:
            Created story, or a structured failure
        """
        with logfire.span("create_story.execute"):
            try:
                identity = self.identity_service.resolve(
                    request.session, request.pseudo_token
                )
                story = await self.story_service.create_story(
                    title=request.title,
                    content=request.content,
                    tags=request.tags,
                    identity=identity,
                    author_name=request.author_name,
                    is_anonymous=request.is_anonymous,
                )
            except DomainError as e:
                logfire.warn("Story submission failed", error=str(e))
                return CreateStoryResponse.failure(e)

            return CreateStoryResponse(story=StoryItem.from_story(story))
