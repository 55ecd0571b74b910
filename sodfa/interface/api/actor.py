"""Actor extraction from HTTP requests."""

import logfire
from fastapi import HTTPException, status
from pydantic import ValidationError

from sodfa.domain.model import SessionIdentity
from sodfa.domain.service import JWTService
from sodfa.domain.value import PseudoToken


def read_actor(
    jwt_service: JWTService, auth_token: str | None, client_id: str | None
) -> tuple[SessionIdentity | None, str | None]:
    """Read the provider session and pseudo token of a request.

    The session comes from the ``auth_token`` cookie; an invalid or expired
    token counts as no session. The pseudo token comes from the
    ``X-Client-Id`` header and must be 20 alphanumeric characters.

    Args:
        jwt_service: JWT service
        auth_token: Session cookie value
        client_id: X-Client-Id header value

    Returns:
        (session, pseudo_token)

    Raises:
        HTTPException: 400 if the X-Client-Id header is malformed
    """
    session = jwt_service.get_session_from_token(auth_token)

    if not client_id:
        return session, None

    try:
        token = PseudoToken(client_id)
    except ValidationError:
        logfire.warn("Malformed client id header", length=len(client_id))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"kind": "validation", "message": "Invalid X-Client-Id header"},
        )
    return session, token.root
