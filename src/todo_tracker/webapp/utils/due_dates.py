"""
Due-date parsing and day-offset calculation.

All arithmetic happens on calendar dates, so the time of day of either side
never skews the result. Plain ``YYYY-MM-DD`` strings are local calendar dates,
not UTC instants.
"""

import re
from datetime import date, datetime
from typing import Any, Optional

from ...shared import epoch_ms_to_local_date

CALENDAR_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_calendar_date(value: Any) -> Optional[date]:
    """
    Interpret a due-date value as a local calendar date.

    Accepts ``date``/``datetime`` objects, ``YYYY-MM-DD`` strings, other
    ISO-8601 datetime strings and epoch milliseconds. Returns None for
    absent, empty or unparseable input.
    """
    if value is None or value == "":
        return None

    if isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, (int, float)):
        try:
            return epoch_ms_to_local_date(value)
        except (OverflowError, OSError, ValueError):
            return None

    if isinstance(value, str):
        text = value.strip()
        if CALENDAR_DATE_PATTERN.match(text):
            try:
                return date.fromisoformat(text)
            except ValueError:
                return None
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError:
            return None
        return parse_calendar_date(parsed)

    return None


def days_until_due(due_date: Any, today: Optional[date] = None) -> Optional[int]:
    """
    Number of calendar days from today until the due date.

    Negative when overdue, 0 when due today, None when there is no due date.
    """
    due_day = parse_calendar_date(due_date)
    if due_day is None:
        return None
    if today is None:
        today = date.today()
    return (due_day - today).days
