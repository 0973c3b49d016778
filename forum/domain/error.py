"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidInputError(DomainError):
    """Raised when a required field is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(message)


class NotAuthorizedError(DomainError):
    """Raised when an actor fails the ownership, token or admin check."""

    def __init__(self, action: str, resource: str, resource_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"Not authorized to {action} {resource} {resource_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class StorageUnavailableError(DomainError):
    """Raised when the document store cannot be reached.

    Safe for callers to retry on reads. Writes are at-most-once and are
    never retried by the core.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Storage unavailable during {operation}{detail}")


class AuthenticationError(DomainError):
    """Raised when admin credentials or an admin session are missing or invalid."""

    def __init__(self, message: str = "Admin authentication required"):
        super().__init__(message)
