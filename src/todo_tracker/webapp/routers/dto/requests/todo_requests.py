"""
Request DTOs for todo-related API endpoints.

Field values are deliberately loose (Any): the row normalizer decides what a
usable value is, so a bad due date becomes "no due date" instead of a 400.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

UPDATABLE_FIELDS = ("task", "due_date", "creation_date", "completed")


class CreateTodoRequest(BaseModel):
    """Request to create a new todo."""

    task: Optional[Any] = Field(None, description="Task text, trimmed; must not be empty")
    due_date: Optional[Any] = Field(None, description="YYYY-MM-DD or ISO-8601 timestamp")
    creation_date: Optional[Any] = Field(None, description="Defaults to now")


class UpdateTodoRequest(BaseModel):
    """Partial update; only fields present in the body are changed."""

    id: Optional[Any] = Field(None, description="Todo id, legacy PUT /todos only")
    task: Optional[Any] = None
    due_date: Optional[Any] = None
    creation_date: Optional[Any] = None
    completed: Optional[Any] = None

    def provided_fields(self) -> Dict[str, Any]:
        return {
            name: getattr(self, name)
            for name in UPDATABLE_FIELDS
            if name in self.model_fields_set
        }


class DeleteTodoRequest(BaseModel):
    """Legacy DELETE /todos body."""

    id: Optional[Any] = None
