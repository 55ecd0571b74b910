"""Story routes."""

from typing import Optional

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel, Field

from sodfa.application.usecase.story import (
    CreateStoryRequest,
    CreateStoryResponse,
    CreateStoryUseCase,
    DeleteStoryRequest,
    DeleteStoryResponse,
    DeleteStoryUseCase,
    GetStoryRequest,
    GetStoryResponse,
    GetStoryUseCase,
    ListStoriesRequest,
    ListStoriesResponse,
    ListStoriesUseCase,
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
    UpdateStoryRequest,
    UpdateStoryResponse,
    UpdateStoryUseCase,
)
from sodfa.domain.service import JWTService
from sodfa.domain.value import StorySortOrder
from sodfa.interface.api.actor import read_actor
from sodfa.interface.error import raise_for_failure

router = APIRouter(prefix="/stories", tags=["stories"], route_class=DishkaRoute)


class CreateStoryAPIRequest(BaseModel):
    """API request for submitting a story."""

    title: str = Field(max_length=1000)
    content: str = Field(max_length=20000)
    tags: list[str] = Field(default_factory=list, max_length=10)
    author_name: Optional[str] = Field(default=None, max_length=100)
    is_anonymous: bool = False


class UpdateStoryAPIRequest(BaseModel):
    """API request for editing a story."""

    title: Optional[str] = Field(default=None, max_length=1000)
    content: Optional[str] = Field(default=None, max_length=20000)
    tags: Optional[list[str]] = Field(default=None, max_length=10)


@router.post(
    "", response_model=CreateStoryResponse, status_code=status.HTTP_201_CREATED
)
async def create_story(
    request: CreateStoryAPIRequest,
    use_case: FromDishka[CreateStoryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    x_client_id: str | None = Header(default=None),
) -> CreateStoryResponse:
    """Submit a story.

    Args:
        request: Story form data
        use_case: Create story use case from DI
        jwt_service: JWT service from DI
        auth_token: Session token from cookie
        x_client_id: Pseudo identity token from header

    Returns:
        Created story (status pending)

    Raises:
        HTTPException: 400 on validation failure, 401 without any identity
    """
    session, pseudo_token = read_actor(jwt_service, auth_token, x_client_id)
    result = await use_case.execute(
        CreateStoryRequest(
            session=session,
            pseudo_token=pseudo_token,
            title=request.title,
            content=request.content,
            tags=request.tags,
            author_name=request.author_name,
            is_anonymous=request.is_anonymous,
        )
    )
    raise_for_failure(result)
    return result


@router.get("", response_model=ListStoriesResponse)
async def list_stories(
    use_case: FromDishka[ListStoriesUseCase],
    tag: Optional[str] = Query(default=None),
    sort: StorySortOrder = Query(default=StorySortOrder.LATEST),
    page: int = Query(default=1, ge=1),
    per_page: Optional[int] = Query(default=None, ge=1, le=50),
) -> ListStoriesResponse:
    """Browse stories.

    Query Parameters:
        tag: Only stories with this tag
        sort: latest, popular or random
        page: 1-based page number
        per_page: Page size (default 6)
    """
    result = await use_case.execute(
        ListStoriesRequest(tag=tag, sort=sort, page=page, per_page=per_page)
    )
    raise_for_failure(result)
    return result


@router.get("/tags", response_model=ListTagsResponse)
async def list_tags(use_case: FromDishka[ListTagsUseCase]) -> ListTagsResponse:
    """Tag cloud for the stories page."""
    result = await use_case.execute(ListTagsRequest())
    raise_for_failure(result)
    return result


@router.get("/{story_id}", response_model=GetStoryResponse)
async def get_story(
    story_id: str, use_case: FromDishka[GetStoryUseCase]
) -> GetStoryResponse:
    """Get a single story."""
    result = await use_case.execute(GetStoryRequest(story_id=story_id))
    raise_for_failure(result)
    return result


@router.patch("/{story_id}", response_model=UpdateStoryResponse)
async def update_story(
    story_id: str,
    request: UpdateStoryAPIRequest,
    use_case: FromDishka[UpdateStoryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    x_client_id: str | None = Header(default=None),
) -> UpdateStoryResponse:
    """Edit a story. Only its author may edit.

    Raises:
        HTTPException: 403 if not the author, 404 if missing
    """
    session, pseudo_token = read_actor(jwt_service, auth_token, x_client_id)
    result = await use_case.execute(
        UpdateStoryRequest(
            session=session,
            pseudo_token=pseudo_token,
            story_id=story_id,
            title=request.title,
            content=request.content,
            tags=request.tags,
        )
    )
    raise_for_failure(result)
    return result


@router.delete("/{story_id}", response_model=DeleteStoryResponse)
async def delete_story(
    story_id: str,
    use_case: FromDishka[DeleteStoryUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    x_client_id: str | None = Header(default=None),
) -> DeleteStoryResponse:
    """Delete a story with its comments and reactions.

    Raises:
        HTTPException: 403 if the caller may not delete it, 404 if missing
    """
    session, pseudo_token = read_actor(jwt_service, auth_token, x_client_id)
    result = await use_case.execute(
        DeleteStoryRequest(
            session=session, pseudo_token=pseudo_token, story_id=story_id
        )
    )
    if not result.success:
        logfire.warn("Story delete rejected", story_id=story_id)
    raise_for_failure(result)
    return result
