"""Reaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header
from pydantic import BaseModel

from sodfa.application.usecase.reaction import (
    GetReactionRequest,
    GetReactionResponse,
    GetReactionUseCase,
    ReactRequest,
    ReactResponse,
    ReactUseCase,
)
from sodfa.domain.service import JWTService
from sodfa.domain.value import ReactionType
from sodfa.interface.api.actor import read_actor
from sodfa.interface.error import raise_for_failure

router = APIRouter(prefix="/stories", tags=["reactions"], route_class=DishkaRoute)


class ReactAPIRequest(BaseModel):
    """API request for reacting to a story."""

    type: ReactionType


@router.post("/{story_id}/reactions", response_model=ReactResponse)
async def react(
    story_id: str,
    request: ReactAPIRequest,
    use_case: FromDishka[ReactUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    x_client_id: str | None = Header(default=None),
) -> ReactResponse:
    """Like or love a story.

    Reacting again with the same type removes the reaction, a different
    type switches it. Pseudo identities (X-Client-Id only) always add.

    Raises:
        HTTPException: 401 without any identity, 404 if the story is missing
    """
    session, pseudo_token = read_actor(jwt_service, auth_token, x_client_id)
    result = await use_case.execute(
        ReactRequest(
            session=session,
            pseudo_token=pseudo_token,
            story_id=story_id,
            type=request.type,
        )
    )
    raise_for_failure(result)
    return result


@router.get("/{story_id}/reactions/me", response_model=GetReactionResponse)
async def get_my_reaction(
    story_id: str,
    use_case: FromDishka[GetReactionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    x_client_id: str | None = Header(default=None),
) -> GetReactionResponse:
    """The caller's current reaction on a story."""
    session, pseudo_token = read_actor(jwt_service, auth_token, x_client_id)
    result = await use_case.execute(
        GetReactionRequest(
            session=session, pseudo_token=pseudo_token, story_id=story_id
        )
    )
    raise_for_failure(result)
    return result
