"""
Unit tests for todo row normalization and the view rendering.
"""

import uuid
from datetime import date, datetime, timezone

import pytest

from todo_tracker.shared.exceptions import ValidationError
from todo_tracker.webapp.repository.entities import Todo
from todo_tracker.webapp.utils.todo_normalizer import (
    coerce_completed,
    is_valid_todo_id,
    normalize_creation_date,
    normalize_task_text,
    normalize_update_fields,
    to_view,
)

NOW_MS = 1_792_398_600_000


class TestNormalizeTaskText:
    def test_trims_whitespace(self):
        assert normalize_task_text("  buy milk  ") == "buy milk"

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_empty_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            normalize_task_text(value)
        assert exc_info.value.message == "Task is required"
        assert exc_info.value.field == "task"

    def test_non_string_is_stringified(self):
        assert normalize_task_text(42) == "42"


class TestNormalizeCreationDate:
    def test_missing_defaults_to_now(self):
        assert normalize_creation_date(None, NOW_MS) == NOW_MS
        assert normalize_creation_date("", NOW_MS) == NOW_MS

    def test_epoch_ms_kept(self):
        assert normalize_creation_date(1234, NOW_MS) == 1234

    def test_iso_string(self):
        assert normalize_creation_date("2026-10-19T08:30:00.000Z", NOW_MS) == NOW_MS

    def test_aware_datetime(self):
        value = datetime(2026, 10, 19, 8, 30, tzinfo=timezone.utc)
        assert normalize_creation_date(value, 0) == NOW_MS

    def test_garbage_defaults_to_now(self):
        assert normalize_creation_date("yesterday-ish", NOW_MS) == NOW_MS

    @pytest.mark.parametrize(
        "value",
        [float("nan"), float("inf"), float("-inf"), 10**16, -(10**16), 1e300],
    )
    def test_unrenderable_number_defaults_to_now(self, value):
        assert normalize_creation_date(value, NOW_MS) == NOW_MS

    def test_out_of_range_string_defaults_to_now(self):
        assert normalize_creation_date("0000-01-01T00:00:00Z", NOW_MS) == NOW_MS

    def test_bool_defaults_to_now(self):
        assert normalize_creation_date(True, NOW_MS) == NOW_MS

    def test_early_but_valid_instant_kept(self):
        assert normalize_creation_date(-86_400_000, NOW_MS) == -86_400_000


class TestCoerceCompleted:
    @pytest.mark.parametrize("value", [True, 1, "true", "TRUE", "1", "yes", "on"])
    def test_truthy(self, value):
        assert coerce_completed(value) is True

    @pytest.mark.parametrize("value", [False, 0, None, "", "false", "0", "no", "off"])
    def test_falsy(self, value):
        assert coerce_completed(value) is False


class TestIsValidTodoId:
    def test_uuid4_string(self):
        assert is_valid_todo_id(str(uuid.uuid4())) is True

    def test_upper_case_uuid(self):
        assert is_valid_todo_id(str(uuid.uuid4()).upper()) is True

    @pytest.mark.parametrize("value", [None, 5, "", "abc", "1234567890abcdef12345678", "{12345678-1234-5678-1234-567812345678}"])
    def test_invalid(self, value):
        assert is_valid_todo_id(value) is False


class TestNormalizeUpdateFields:
    def test_only_present_fields(self):
        assert normalize_update_fields({"completed": "true"}, NOW_MS) == {"completed": True}

    def test_null_due_date_clears_it(self):
        assert normalize_update_fields({"due_date": None}, NOW_MS) == {"due_date": None}

    def test_all_fields(self):
        updates = normalize_update_fields(
            {
                "task": " new text ",
                "due_date": "2026-10-20",
                "creation_date": 5,
                "completed": False,
            },
            NOW_MS,
        )
        assert updates == {
            "task": "new text",
            "due_date": date(2026, 10, 20),
            "creation_date": 5,
            "completed": False,
        }

    def test_empty_task_rejected(self):
        with pytest.raises(ValidationError):
            normalize_update_fields({"task": "  "}, NOW_MS)

    def test_unknown_fields_ignored(self):
        assert normalize_update_fields({"owner_id": "someone"}, NOW_MS) == {}


class TestToView:
    def test_renders_wire_shape(self, fixed_today):
        todo = Todo(
            id="0b0d7f4e-3c1a-4a5e-9d1b-2f6c9b1e7a10",
            task="write report",
            creation_date=NOW_MS,
            due_date=date(2026, 10, 21),
            completed=False,
            owner_id="42",
        )

        view = to_view(todo, today=fixed_today)

        assert view == {
            "id": "0b0d7f4e-3c1a-4a5e-9d1b-2f6c9b1e7a10",
            "task": "write report",
            "creation_date": "2026-10-19T08:30:00.000Z",
            "due_date": "2026-10-21",
            "completed": False,
            "days_until_due": 2,
        }

    def test_no_due_date(self, fixed_today):
        todo = Todo(id="x", task="t", creation_date=0)
        view = to_view(todo, today=fixed_today)
        assert view["due_date"] is None
        assert view["days_until_due"] is None
