"""Domain error translation to HTTP status codes."""

from fastapi import status

from devsocial.domain.error import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidOperationError,
    NotFoundError,
    StorageError,
    ValidationError,
)


_STATUS_BY_ERROR: dict[type[DomainError], int] = {
    ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ForbiddenError: status.HTTP_403_FORBIDDEN,
    ConflictError: status.HTTP_409_CONFLICT,
    InvalidOperationError: status.HTTP_400_BAD_REQUEST,
    StorageError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def status_for(error: DomainError) -> int:
    """HTTP status code for a domain error, 500 for unmapped kinds."""
    for error_type, code in _STATUS_BY_ERROR.items():
        if isinstance(error, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
