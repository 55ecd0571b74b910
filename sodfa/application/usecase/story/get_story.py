"""Get story use case."""

from typing import Optional

from pydantic import BaseModel

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import OperationResponse, StoryItem
from sodfa.domain.error import DomainError
from sodfa.domain.service import StoryService
from sodfa.domain.value import StoryId


class GetStoryRequest(BaseModel):
    """Get story request."""

    story_id: str


class GetStoryResponse(OperationResponse):
    """Get story response."""

    story: Optional[StoryItem] = None


class GetStoryUseCase(BaseUseCase):
    """Use case for reading a single story."""

    def __init__(self, story_service: StoryService) -> None:
        self.story_service = story_service

    async def execute(self, request: GetStoryRequest) -> GetStoryResponse:
        """Fetch a story by id."""
        try:
            story = await self.story_service.get_story(StoryId(request.story_id))
        except DomainError as e:
            return GetStoryResponse.failure(e)
        return GetStoryResponse(story=StoryItem.from_story(story))
