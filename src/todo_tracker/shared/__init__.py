from .timestamps import (
    datetime_to_epoch_ms,
    epoch_ms_to_datetime,
    epoch_ms_to_iso8601,
    epoch_ms_to_local_date,
    iso8601_to_epoch_ms,
    now_epoch_ms,
)

__all__ = [
    "now_epoch_ms",
    "epoch_ms_to_datetime",
    "datetime_to_epoch_ms",
    "epoch_ms_to_iso8601",
    "iso8601_to_epoch_ms",
    "epoch_ms_to_local_date",
]
