"""List author stories use case (profile page)."""

from pydantic import BaseModel, Field

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import OperationResponse, StoryItem
from sodfa.domain.error import DomainError
from sodfa.domain.service import StoryService
from sodfa.domain.value import OwnerKey


class ListAuthorStoriesRequest(BaseModel):
    """List author stories request."""

    author_id: str


class ListAuthorStoriesResponse(OperationResponse):
    """List author stories response."""

    stories: list[StoryItem] = Field(default_factory=list)


class ListAuthorStoriesUseCase(BaseUseCase):
    """Use case for listing the stories an account submitted."""

    def __init__(self, story_service: StoryService) -> None:
        self.story_service = story_service

    async def execute(
        self, request: ListAuthorStoriesRequest
    ) -> ListAuthorStoriesResponse:
        """Return the author's stories, newest first."""
        try:
            stories = await self.story_service.list_stories_by_author(
                OwnerKey(request.author_id)
            )
        except DomainError as e:
            return ListAuthorStoriesResponse.failure(e)
        return ListAuthorStoriesResponse(
            stories=[StoryItem.from_story(story) for story in stories]
        )
