"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class StoreError(AdapterError):
    """Document store request failed."""

    pass


class MissingIndexError(StoreError):
    """Document store rejected a query that needs a composite index."""

    pass


class DocumentMissingError(StoreError):
    """Document addressed by an update does not exist."""

    pass


class IdentityProviderError(AdapterError):
    """Identity provider request failed."""

    def __init__(self, message: str, code: str | None = None):
        self.code = code
        super().__init__(message)
