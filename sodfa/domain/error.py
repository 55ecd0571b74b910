"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (missing title, empty comment, ...)."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when an actor attempts to mutate content it does not own."""

    def __init__(self, resource: str, resource_id: str, owner_key: str | None):
        self.resource = resource
        self.resource_id = resource_id
        self.owner_key = owner_key
        super().__init__(
            f"Actor {owner_key} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InfrastructureError(DomainError):
    """Raised when the backing store or identity provider fails."""

    pass


class IndexUnavailableError(InfrastructureError):
    """Raised when the store cannot serve a compound (filter + sort) query."""

    pass


class IdentityUnavailableError(DomainError):
    """Raised when no usable identity could be resolved for the actor.

    The caller should obtain a pseudo identity token or create an
    ephemeral session and retry.
    """

    def __init__(self, message: str = "No identity available for this request"):
        super().__init__(message)


class AuthenticationError(DomainError):
    """Raised when the identity provider rejects the supplied credentials."""

    def __init__(self, message: str, code: str | None = None):
        self.code = code
        super().__init__(message)
