"""
Exception types and handlers for consistent error handling.

Provides:
- Business exception types (ValidationError, EntityNotFoundError, UnauthorizedError)
- FastAPI exception handlers rendering {"error": message} bodies
"""

from .exceptions import (
    TodoTrackerException,
    ValidationError,
    EntityNotFoundError,
    UnauthorizedError,
    EntityOperation,
)
from .exception_handlers import register_exception_handlers, error_body

__all__ = [
    "TodoTrackerException",
    "ValidationError",
    "EntityNotFoundError",
    "UnauthorizedError",
    "EntityOperation",
    "register_exception_handlers",
    "error_body",
]
