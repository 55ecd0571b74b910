"""Authentication routes.

Sessions are issued by the identity provider and carried in the
``auth_token`` cookie as a JWT signed by this service.
"""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Response, status
from pydantic import BaseModel

from sodfa.application.usecase.auth import (
    CreateAnonymousSessionRequest,
    CreateAnonymousSessionUseCase,
    FederatedSignInRequest,
    FederatedSignInUseCase,
    GetCurrentIdentityRequest,
    GetCurrentIdentityResponse,
    GetCurrentIdentityUseCase,
    SessionResponse,
    SignInRequest,
    SignInUseCase,
    SignUpRequest,
    SignUpUseCase,
)
from sodfa.application.usecase.common import ErrorKind
from sodfa.config import Settings
from sodfa.domain.service import JWTService
from sodfa.interface.api.actor import read_actor
from sodfa.interface.error import raise_for_failure

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def _set_session_cookie(
    response: Response, session_response: SessionResponse, settings: Settings
) -> None:
    """Attach the session token cookie to a successful session response."""
    raise_for_failure(
        session_response, overrides={ErrorKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED}
    )

    is_production = settings.environment == "production"
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=session_response.token or "",
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )
    logger.info(
        f"Session cookie set: environment={settings.environment}, "
        f"secure={is_production}"
    )


@router.post("/anonymous", response_model=SessionResponse)
async def create_anonymous_session(
    response: Response,
    use_case: FromDishka[CreateAnonymousSessionUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Create a shadow (anonymous) session.

    Clients without an account or pseudo token call this before reacting
    or commenting.
    """
    result = await use_case.execute(CreateAnonymousSessionRequest())
    _set_session_cookie(response, result, settings)
    return result


@router.post("/signup", response_model=SessionResponse)
async def sign_up(
    request: SignUpRequest,
    response: Response,
    use_case: FromDishka[SignUpUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Create an email/password account and start its session."""
    result = await use_case.execute(request)
    _set_session_cookie(response, result, settings)
    return result


@router.post("/login", response_model=SessionResponse)
async def sign_in(
    request: SignInRequest,
    response: Response,
    use_case: FromDishka[SignInUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Sign in with email and password."""
    result = await use_case.execute(request)
    _set_session_cookie(response, result, settings)
    return result


@router.post("/federated", response_model=SessionResponse)
async def federated_sign_in(
    request: FederatedSignInRequest,
    response: Response,
    use_case: FromDishka[FederatedSignInUseCase],
    settings: FromDishka[Settings],
) -> SessionResponse:
    """Sign in with a federated provider token (e.g. Google)."""
    result = await use_case.execute(request)
    _set_session_cookie(response, result, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Clear the session cookie.

    The pseudo token lives on the client and is not affected.
    """
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=GetCurrentIdentityResponse)
async def get_current_identity(
    use_case: FromDishka[GetCurrentIdentityUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    x_client_id: str | None = Header(default=None),
) -> GetCurrentIdentityResponse:
    """Return the identity the caller acts as.

    Without a session or pseudo token the response carries an
    ``identity_unavailable`` error instead of raising.
    """
    session, pseudo_token = read_actor(jwt_service, auth_token, x_client_id)
    return await use_case.execute(
        GetCurrentIdentityRequest(session=session, pseudo_token=pseudo_token)
    )
