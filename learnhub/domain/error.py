"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class InvalidArgumentError(DomainError):
    """Raised when an operation receives a malformed argument combination."""

    def __init__(self, message: str):
        super().__init__(message)


class ForbiddenError(DomainError):
    """Raised when a user acts on a resource they neither own nor administer."""

    def __init__(self, action: str, resource: str, user_id: str):
        self.action = action
        self.resource = resource
        self.user_id = user_id
        super().__init__(f"User {user_id} is not allowed to {action} {resource}")


class ConflictError(DomainError):
    """Raised when creating something that already exists."""

    def __init__(self, message: str):
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
