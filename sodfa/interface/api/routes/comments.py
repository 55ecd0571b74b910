"""Comment routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from sodfa.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from sodfa.domain.service import JWTService
from sodfa.interface.api.actor import read_actor
from sodfa.interface.error import raise_for_failure

router = APIRouter(prefix="/stories", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for commenting."""

    text: str = Field(max_length=5000)


@router.post(
    "/{story_id}/comments",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    story_id: str,
    request: AddCommentAPIRequest,
    use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    x_client_id: str | None = Header(default=None),
) -> AddCommentResponse:
    """Comment on a story.

    Raises:
        HTTPException: 400 for empty text, 401 without any identity,
            404 if the story is missing
    """
    session, pseudo_token = read_actor(jwt_service, auth_token, x_client_id)
    result = await use_case.execute(
        AddCommentRequest(
            session=session,
            pseudo_token=pseudo_token,
            story_id=story_id,
            text=request.text,
        )
    )
    raise_for_failure(result)
    return result


@router.get("/{story_id}/comments", response_model=ListCommentsResponse)
async def list_comments(
    story_id: str,
    use_case: FromDishka[ListCommentsUseCase],
    limit: Optional[int] = Query(default=None, ge=1, le=500),
) -> ListCommentsResponse:
    """Comments on a story, newest first.

    A ``warning`` in the body means the store index is missing and the
    comments were sorted by the service instead.
    """
    result = await use_case.execute(ListCommentsRequest(story_id=story_id, limit=limit))
    raise_for_failure(result)
    return result
