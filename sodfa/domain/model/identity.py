"""Identity models.

A ``SessionIdentity`` is what the identity provider issued for the current
browser (durable account or ephemeral anonymous session). A
``ResolvedIdentity`` is the single identity the ledgers act on after
resolution.
"""

from typing import Optional

from sodfa.domain.value import IdentityClass, OwnerKey
from sodfa.domain.value.common import ValueObject


class SessionIdentity(ValueObject):
    """Session issued by the identity provider."""

    uid: str
    display_name: Optional[str] = None
    email: Optional[str] = None
    is_ephemeral: bool = False  # Anonymous session without credentials


class ResolvedIdentity(ValueObject):
    """Actor identity used for attribution and ownership checks."""

    identity_class: IdentityClass
    owner_key: OwnerKey
    display_name: str
    is_anonymous: bool

    @property
    def is_trackable(self) -> bool:
        """Whether reactions are stored per owner for this identity."""
        return self.identity_class.is_trackable
