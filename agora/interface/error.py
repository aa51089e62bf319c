"""Translation of domain errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status

from agora.domain.error import (
    CapabilityUnsupportedError,
    DomainError,
    DuplicateVoteError,
    NotFoundError,
    ValidationError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error returned to the client.

    Args:
        error: Error raised by a use case

    Returns:
        HTTPException with the matching status code
    """
    if isinstance(error, ValidationError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"field": error.field, "message": error.message},
        )
    if isinstance(error, DuplicateVoteError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, CapabilityUnsupportedError):
        return HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(error)
        )
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))

    logfire.error("Unmapped domain error", error=str(error), error_type=type(error).__name__)
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)
    )
