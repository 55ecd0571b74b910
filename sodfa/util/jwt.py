"""JWT token utilities."""

from datetime import UTC, datetime, timedelta

import jwt
from pydantic import BaseModel

from sodfa.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload describing the provider session."""

    uid: str
    display_name: str | None = None
    email: str | None = None
    is_ephemeral: bool = False
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    uid: str,
    settings: AuthSettings,
    display_name: str | None = None,
    email: str | None = None,
    is_ephemeral: bool = False,
) -> str:
    """Create a session JWT.

    Args:
        uid: Identity provider user id
        settings: Authentication settings
        display_name: Account display name
        email: Account email
        is_ephemeral: Whether the session is an anonymous one

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(UTC) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "uid": uid,
        "display_name": display_name,
        "email": email,
        "is_ephemeral": is_ephemeral,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session JWT.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
