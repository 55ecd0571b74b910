"""List comments use case."""

from typing import Optional

from pydantic import BaseModel, Field

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import CommentItem, OperationResponse
from sodfa.domain.error import DomainError
from sodfa.domain.service import CommentService
from sodfa.domain.value import StoryId


class ListCommentsRequest(BaseModel):
    """List comments request."""

    story_id: str
    limit: Optional[int] = Field(default=None, ge=1)


class ListCommentsResponse(OperationResponse):
    """List comments response.

    ``warning`` is set when the listing was sorted locally because the
    store could not serve the sorted query. The listing is still complete.
    """

    comments: list[CommentItem] = Field(default_factory=list)
    warning: Optional[str] = None


class ListCommentsUseCase(BaseUseCase):
    """Use case for reading a story's comments, newest first."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """List comments on a story."""
        try:
            listing = await self.comment_service.list_comments(
                StoryId(request.story_id), limit=request.limit
            )
        except DomainError as e:
            return ListCommentsResponse.failure(e)

        return ListCommentsResponse(
            comments=[CommentItem.from_comment(c) for c in listing.comments],
            warning=listing.warning,
        )
