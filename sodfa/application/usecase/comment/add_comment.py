"""Add comment use case."""

from typing import Optional

import logfire

from sodfa.application.usecase.base import BaseUseCase
from sodfa.application.usecase.common import (
    ActorRequest,
    CommentItem,
    OperationResponse,
)
from sodfa.domain.error import DomainError
from sodfa.domain.service import CommentService, IdentityService
from sodfa.domain.value import StoryId


class AddCommentRequest(ActorRequest):
    """Add comment request."""

    story_id: str
    text: str


class AddCommentResponse(OperationResponse):
    """Add comment response."""

    comment: Optional[CommentItem] = None


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a story."""

    def __init__(
        self, identity_service: IdentityService, comment_service: CommentService
    ) -> None:
        """Initialize add comment use case.

        Args:
            identity_service: Identity resolution service
            comment_service: Comment ledger
        """
        self.identity_service = identity_service
        self.comment_service = comment_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Args:
            request: Add comment request

        Returns:
            Created comment, or a structured failure
        """
        with logfire.span("add_comment.execute", story_id=request.story_id):
            try:
                identity = self.identity_service.resolve(
                    request.session, request.pseudo_token
                )
                comment = await self.comment_service.add_comment(
                    StoryId(request.story_id), request.text, identity
                )
            except DomainError as e:
                logfire.warn("Comment failed", story_id=request.story_id, error=str(e))
                return AddCommentResponse.failure(e)

            return AddCommentResponse(comment=CommentItem.from_comment(comment))
