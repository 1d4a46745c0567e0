"""
Conversion of todo rows between the stored shape and the wire shape.

Write side: trims and validates the task text, defaults the dates, coerces the
completion flag. Read side: renders a stored Todo as the JSON view object and
attaches the derived ``days_until_due`` field.
"""

import uuid
from datetime import date, datetime
from typing import Any, Dict, Optional

from ...shared import (
    datetime_to_epoch_ms,
    epoch_ms_to_datetime,
    epoch_ms_to_iso8601,
    iso8601_to_epoch_ms,
)
from ...shared.exceptions import ValidationError
from ..repository.entities import Todo
from .due_dates import days_until_due, parse_calendar_date

TRUTHY_STRINGS = {"true", "1", "yes", "on"}


def normalize_task_text(value: Any) -> str:
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValidationError("Task is required", field="task")
    return text


def normalize_due_date(value: Any) -> Optional[date]:
    return parse_calendar_date(value)


def _to_epoch_ms(value: Any) -> Optional[int]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, datetime):
        return datetime_to_epoch_ms(value)
    if isinstance(value, date):
        return datetime_to_epoch_ms(datetime(value.year, value.month, value.day))
    if isinstance(value, str):
        return iso8601_to_epoch_ms(value)
    return None


def normalize_creation_date(value: Any, now_ms: int) -> int:
    """
    Epoch milliseconds for the creation timestamp.

    Falls back to now_ms for absent or unparseable input, and for instants
    that cannot be rendered back as ISO-8601 (NaN, infinity, years outside
    1-9999), so every stored row stays listable.
    """
    try:
        epoch_ms = _to_epoch_ms(value)
        if epoch_ms is None:
            return now_ms
        epoch_ms_to_datetime(epoch_ms)
    except (OverflowError, OSError, ValueError):
        return now_ms
    return epoch_ms


def coerce_completed(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_STRINGS
    return bool(value)


def is_valid_todo_id(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        return str(uuid.UUID(value)) == value.lower()
    except ValueError:
        return False


def normalize_update_fields(fields: Dict[str, Any], now_ms: int) -> Dict[str, Any]:
    """Normalize the subset of updatable fields present in a partial update."""
    updates: Dict[str, Any] = {}
    if "task" in fields:
        updates["task"] = normalize_task_text(fields["task"])
    if "creation_date" in fields:
        updates["creation_date"] = normalize_creation_date(fields["creation_date"], now_ms)
    if "due_date" in fields:
        updates["due_date"] = normalize_due_date(fields["due_date"])
    if "completed" in fields:
        updates["completed"] = coerce_completed(fields["completed"])
    return updates


def to_view(todo: Todo, today: Optional[date] = None) -> Dict[str, Any]:
    """Render a stored todo as the API view object, owner excluded."""
    return {
        "id": todo.id,
        "task": todo.task,
        "creation_date": epoch_ms_to_iso8601(todo.creation_date),
        "due_date": todo.due_date.isoformat() if todo.due_date else None,
        "completed": bool(todo.completed),
        "days_until_due": days_until_due(todo.due_date, today=today),
    }
