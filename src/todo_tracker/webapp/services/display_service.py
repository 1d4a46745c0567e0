"""
Display ordering, due labels and progress for the task list.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from ...shared import iso8601_to_epoch_ms


@dataclass(frozen=True)
class ProgressSummary:
    total: int
    completed: int
    percent: int
    celebrate: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _created_at_ms(view: Dict[str, Any]) -> int:
    created = view.get("creation_date")
    return iso8601_to_epoch_ms(created) if created else 0


def _display_sort_key(view: Dict[str, Any]):
    due_date = view.get("due_date")
    return (
        bool(view.get("completed")),
        due_date is None,
        due_date or "",
        _created_at_ms(view),
    )


def sort_for_display(views: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Order views for display.

    Incomplete before complete; within the same state, earlier due date first
    with undated todos last; ties broken by creation time ascending. Due dates
    are ``YYYY-MM-DD`` and sort as text; creation dates are compared as
    instants.
    """
    return sorted(views, key=_display_sort_key)


def format_due_label(days: Optional[int]) -> str:
    if days is None:
        return ""
    if days > 1:
        return f"Due in {days} days"
    if days == 1:
        return "Due in 1 day"
    if days == 0:
        return "Due today"
    if days == -1:
        return "Overdue by 1 day"
    return f"Overdue by {-days} days"


def summarize_progress(views: Iterable[Dict[str, Any]]) -> ProgressSummary:
    views = list(views)
    total = len(views)
    completed = sum(1 for view in views if view.get("completed"))
    percent = round(completed * 100 / total) if total else 0
    return ProgressSummary(
        total=total,
        completed=completed,
        percent=percent,
        celebrate=total > 0 and completed == total,
    )


def build_display(views: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    """Sorted, labelled items plus the progress summary."""
    views = list(views)
    items = [
        {**view, "due_label": format_due_label(view.get("days_until_due"))}
        for view in sort_for_display(views)
    ]
    return {
        "items": items,
        "progress": summarize_progress(views).to_dict(),
    }
