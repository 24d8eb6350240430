"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or out-of-range input (negative seconds, bad username...)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when the acting user may not touch the target resource."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to act on {resource} {resource_id}"
        )


class ConflictError(DomainError):
    """Raised when an operation collides with existing state.

    Duplicate pending request, already friends, already-responded request,
    taken username.
    """

    pass


class InvalidOperationError(DomainError):
    """Raised when an operation makes no sense for its arguments."""

    pass


class StorageError(DomainError):
    """Underlying store unavailable or failing. Always surfaced."""

    pass
