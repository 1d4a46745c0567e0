from .todo_responses import (
    TodoResponse,
    TodoDisplayItemResponse,
    ProgressResponse,
    TodoDisplayResponse,
)

__all__ = [
    "TodoResponse",
    "TodoDisplayItemResponse",
    "ProgressResponse",
    "TodoDisplayResponse",
]
