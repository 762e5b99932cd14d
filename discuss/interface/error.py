"""Interface layer error mapping."""

import logfire
from fastapi import HTTPException, status

from discuss.domain.error import (
    DomainError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)

# Order matters: subclasses must come before their bases
_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (InvalidStateError, status.HTTP_409_CONFLICT),
]


def to_http_exception(error: DomainError) -> HTTPException:
    """Translate a domain error into the HTTP error the client sees.

    Args:
        error: Error raised by a use case or domain service

    Returns:
        HTTPException carrying the status code and the error message
    """
    status_code = next(
        (code for kind, code in _STATUS_BY_ERROR if isinstance(error, kind)),
        status.HTTP_400_BAD_REQUEST,
    )
    logfire.warn(
        "Request rejected",
        error=str(error),
        error_type=type(error).__name__,
        status_code=status_code,
    )
    return HTTPException(status_code=status_code, detail=str(error))
