"""Authentication use cases."""

from .create_anonymous_session import (
    CreateAnonymousSessionRequest,
    CreateAnonymousSessionUseCase,
)
from .federated_sign_in import FederatedSignInRequest, FederatedSignInUseCase
from .get_current_identity import (
    GetCurrentIdentityRequest,
    GetCurrentIdentityResponse,
    GetCurrentIdentityUseCase,
)
from .session import SessionInfo, SessionResponse
from .sign_in import SignInRequest, SignInUseCase
from .sign_up import SignUpRequest, SignUpUseCase

__all__ = [
    "CreateAnonymousSessionRequest",
    "CreateAnonymousSessionUseCase",
    "FederatedSignInRequest",
    "FederatedSignInUseCase",
    "GetCurrentIdentityRequest",
    "GetCurrentIdentityResponse",
    "GetCurrentIdentityUseCase",
    "SessionInfo",
    "SessionResponse",
    "SignInRequest",
    "SignInUseCase",
    "SignUpRequest",
    "SignUpUseCase",
]
