"""Session response models shared by the auth use cases."""

from typing import Optional

from pydantic import BaseModel

from sodfa.application.usecase.common import OperationResponse
from sodfa.domain.model import SessionIdentity


class SessionInfo(BaseModel):
    """Provider session in responses."""

    uid: str
    display_name: Optional[str]
    email: Optional[str]
    is_ephemeral: bool

    @classmethod
    def from_session(cls, session: SessionIdentity) -> "SessionInfo":
        """Build from a SessionIdentity."""
        return cls(
            uid=session.uid,
            display_name=session.display_name,
            email=session.email,
            is_ephemeral=session.is_ephemeral,
        )


class SessionResponse(OperationResponse):
    """Issued session with its signed token."""

    token: Optional[str] = None
    session: Optional[SessionInfo] = None
