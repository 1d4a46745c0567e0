"""
Pure helpers for due-date math and todo row normalization.
"""

from .due_dates import days_until_due, parse_calendar_date
from .todo_normalizer import (
    coerce_completed,
    is_valid_todo_id,
    normalize_creation_date,
    normalize_due_date,
    normalize_task_text,
    normalize_update_fields,
    to_view,
)

__all__ = [
    "days_until_due",
    "parse_calendar_date",
    "coerce_completed",
    "is_valid_todo_id",
    "normalize_creation_date",
    "normalize_due_date",
    "normalize_task_text",
    "normalize_update_fields",
    "to_view",
]
