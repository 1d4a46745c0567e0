"""
Service layer for todo business logic and presentation.
"""

from .display_service import (
    ProgressSummary,
    build_display,
    format_due_label,
    sort_for_display,
    summarize_progress,
)
from .todo_service import TodoService

__all__ = [
    "ProgressSummary",
    "TodoService",
    "build_display",
    "format_due_label",
    "sort_for_display",
    "summarize_progress",
]
