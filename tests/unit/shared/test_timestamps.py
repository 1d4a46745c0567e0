"""
Unit tests for the epoch-millisecond timestamp helpers.
"""

import time
from datetime import datetime, timezone

import pytest

from todo_tracker.shared import (
    datetime_to_epoch_ms,
    epoch_ms_to_datetime,
    epoch_ms_to_iso8601,
    epoch_ms_to_local_date,
    iso8601_to_epoch_ms,
    now_epoch_ms,
)


class TestEpochMsToIso8601:
    def test_epoch_zero(self):
        assert epoch_ms_to_iso8601(0) == "1970-01-01T00:00:00.000Z"

    def test_keeps_milliseconds(self):
        # 2026-10-19T08:30:00.123Z
        assert epoch_ms_to_iso8601(1792398600123) == "2026-10-19T08:30:00.123Z"

    def test_strings_sort_chronologically(self):
        earlier = epoch_ms_to_iso8601(1_700_000_000_000)
        later = epoch_ms_to_iso8601(1_700_000_000_001)
        assert earlier < later


class TestNowEpochMs:
    def test_close_to_wall_clock(self):
        before = int(time.time() * 1000)
        value = now_epoch_ms()
        after = int(time.time() * 1000)
        assert before <= value <= after


def test_local_date_matches_local_datetime():
    ms = 1_792_398_600_000
    assert epoch_ms_to_local_date(ms) == datetime.fromtimestamp(ms / 1000).date()


class TestIso8601RoundTrip:
    def test_early_years_are_zero_padded(self):
        ms = datetime_to_epoch_ms(datetime(999, 3, 4, 5, 6, 7, 890000, tzinfo=timezone.utc))
        assert epoch_ms_to_iso8601(ms) == "0999-03-04T05:06:07.890Z"

    def test_parse_back(self):
        assert iso8601_to_epoch_ms("2026-10-19T08:30:00.123Z") == 1792398600123

    def test_parse_with_offset(self):
        assert iso8601_to_epoch_ms("2026-10-19T10:30:00.000+02:00") == 1792398600000


@pytest.mark.parametrize("epoch_ms", [10**16, -(10**16)])
def test_unrepresentable_instant_raises(epoch_ms):
    with pytest.raises((OverflowError, OSError, ValueError)):
        epoch_ms_to_datetime(epoch_ms)
