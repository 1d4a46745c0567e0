"""
Response DTOs for todo-related API endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel


class TodoResponse(BaseModel):
    """Task view object."""

    id: str
    task: str
    creation_date: str  # ISO-8601 UTC
    due_date: Optional[str] = None  # YYYY-MM-DD
    completed: bool
    days_until_due: Optional[int] = None


class TodoDisplayItemResponse(TodoResponse):
    due_label: str = ""


class ProgressResponse(BaseModel):
    total: int
    completed: int
    percent: int
    celebrate: bool


class TodoDisplayResponse(BaseModel):
    items: List[TodoDisplayItemResponse]
    progress: ProgressResponse
