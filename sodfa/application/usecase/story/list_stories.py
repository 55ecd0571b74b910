"""List stories use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import OperationResponse, StoryItem
from sodfa.domain.error import DomainError
from sodfa.domain.service import StoryService
from sodfa.domain.value import StorySortOrder


class ListStoriesRequest(BaseModel):
    """List stories request."""

    tag: Optional[str] = None
    sort: StorySortOrder = StorySortOrder.LATEST
    page: int = Field(default=1, ge=1)
    per_page: Optional[int] = Field(default=None, ge=1, le=50)


class ListStoriesResponse(OperationResponse):
    """List stories response."""

    stories: list[StoryItem] = Field(default_factory=list)
    page: int = 1
    total_pages: int = 0
    total: int = 0


class ListStoriesUseCase(BaseUseCase):
    """Use case for browsing stories with tag filter, sort and pagination."""

    def __init__(self, story_service: StoryService) -> None:
        """Initialize list stories use case.

        Args:
            story_service: Story domain service
        """
        self.story_service = story_service

    async def execute(self, request: ListStoriesRequest) -> ListStoriesResponse:
        """Execute list stories flow.

        Args:
            request: List stories request with filters and pagination

        Returns:
            One page of stories
        """
        with logfire.span(
            "list_stories.execute",
            tag=request.tag,
            sort=request.sort.value,
            page=request.page,
        ):
            try:
                result = await self.story_service.list_stories(
                    tag=request.tag,
                    sort=request.sort,
                    page=request.page,
                    per_page=request.per_page,
                )
            except DomainError as e:
                return ListStoriesResponse.failure(e)

            return ListStoriesResponse(
                stories=[StoryItem.from_story(story) for story in result.stories],
                page=result.page,
                total_pages=result.total_pages,
                total=result.total,
            )
