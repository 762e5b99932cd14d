"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Input failed validation (empty content, malformed identifier, ...)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when a user acts on a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str, action: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        self.action = action
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class InvalidStateError(DomainError):
    """Raised when an operation is not legal in the resource's current state."""

    def __init__(self, message: str):
        super().__init__(message)


class ConcurrentModificationError(InvalidStateError):
    """Raised when a competing write changed the record after it was read."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} was modified concurrently")
