"""Interface layer errors.

Use cases return structured failures; routes turn them into HTTP errors
whose detail keeps the failure kind so clients can tell an identity prompt
apart from a generic error.
"""

from fastapi import HTTPException, status

from sodfa.application.usecase.common import ErrorKind, OperationResponse

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNAUTHORIZED: status.HTTP_403_FORBIDDEN,
    ErrorKind.INFRASTRUCTURE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.IDENTITY_UNAVAILABLE: status.HTTP_401_UNAUTHORIZED,
}


def raise_for_failure(
    response: OperationResponse, overrides: dict[ErrorKind, int] | None = None
) -> None:
    """Raise an HTTPException if the use case response is a failure.

    Args:
        response: Use case response
        overrides: Per-route status codes replacing the defaults

    Raises:
        HTTPException: With detail ``{"kind": ..., "message": ...}``
    """
    if response.success or response.error is None:
        return

    kind = response.error.kind
    status_code = (overrides or {}).get(kind, STATUS_BY_KIND[kind])
    raise HTTPException(
        status_code=status_code, detail=response.error.model_dump(mode="json")
    )
