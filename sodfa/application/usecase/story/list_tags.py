"""List tags use case."""

from pydantic import BaseModel, Field

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import OperationResponse
from sodfa.domain.error import DomainError
from sodfa.domain.service import StoryService


class ListTagsRequest(BaseModel):
    """List tags request (no parameters)."""

    pass


class ListTagsResponse(OperationResponse):
    """List tags response."""

    tags: list[str] = Field(default_factory=list)


class ListTagsUseCase(BaseUseCase):
    """Use case for the tag cloud on the stories page."""

    def __init__(self, story_service: StoryService) -> None:
        self.story_service = story_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Return tags of visible stories."""
        try:
            tags = await self.story_service.list_tags()
        except DomainError as e:
            return ListTagsResponse.failure(e)
        return ListTagsResponse(tags=tags)
