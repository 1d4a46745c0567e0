"""Exception hierarchy for todo-tracker business errors."""

from enum import Enum


class EntityOperation(str, Enum):
    """Operation that was being attempted when an entity lookup failed."""
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class TodoTrackerException(Exception):
    """Base exception for all errors that map to an HTTP status."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(TodoTrackerException):
    """Raised when request data is invalid (empty task text, malformed identifier)."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class EntityNotFoundError(TodoTrackerException):
    """Raised when a requested entity does not exist or is not visible to the caller."""

    status_code = 404

    def __init__(
        self,
        entity_type: str,
        entity_id: str,
        operation: EntityOperation = EntityOperation.READ,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.operation = operation
        super().__init__(f"No {entity_type} with ID {entity_id}")


class UnauthorizedError(TodoTrackerException):
    """Raised when a request needs an authenticated session and has none."""

    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)
