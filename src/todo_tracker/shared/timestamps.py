"""
Epoch-millisecond timestamp helpers.

Timestamps are stored as epoch milliseconds (int) and converted to ISO-8601
strings only at the API boundary.
"""

import time
from datetime import date, datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
ONE_MS = timedelta(milliseconds=1)


def now_epoch_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


def epoch_ms_to_datetime(epoch_ms: int) -> datetime:
    """
    Aware UTC datetime for an epoch-millisecond instant.

    Raises:
        OverflowError, OSError, ValueError: If the instant is outside the
            range datetime can represent
    """
    return EPOCH + timedelta(milliseconds=epoch_ms)


def epoch_ms_to_iso8601(epoch_ms: int) -> str:
    """Convert epoch milliseconds to an ISO-8601 UTC string, e.g. 2026-10-19T08:30:00.000Z."""
    dt = epoch_ms_to_datetime(epoch_ms)
    return dt.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def datetime_to_epoch_ms(value: datetime) -> int:
    """Exact epoch milliseconds; naive datetimes are local time."""
    if value.tzinfo is None:
        value = value.astimezone()
    return (value - EPOCH) // ONE_MS


def iso8601_to_epoch_ms(value: str) -> int:
    """Inverse of epoch_ms_to_iso8601; accepts any ISO-8601 string, naive ones as local time."""
    return datetime_to_epoch_ms(datetime.fromisoformat(value.strip().replace("Z", "+00:00")))


def epoch_ms_to_local_date(epoch_ms: float) -> date:
    """Calendar date of an epoch-millisecond instant in local time."""
    return datetime.fromtimestamp(epoch_ms / 1000).date()
