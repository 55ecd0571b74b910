"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from sodfa.application.usecase.story import (
    ListAuthorStoriesRequest,
    ListAuthorStoriesResponse,
    ListAuthorStoriesUseCase,
)
from sodfa.interface.error import raise_for_failure

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{author_id}/stories", response_model=ListAuthorStoriesResponse)
async def list_author_stories(
    author_id: str, use_case: FromDishka[ListAuthorStoriesUseCase]
) -> ListAuthorStoriesResponse:
    """Stories submitted by an account (profile page), newest first."""
    result = await use_case.execute(ListAuthorStoriesRequest(author_id=author_id))
    raise_for_failure(result)
    return result
