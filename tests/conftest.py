"""Shared pytest fixtures for todo-tracker tests."""

from datetime import date

import pytest

from todo_tracker.webapp import dependencies


@pytest.fixture(autouse=True)
def reset_dependencies():
    """Each test starts and ends without a configured application."""
    dependencies.reset()
    yield
    dependencies.reset()


@pytest.fixture
def fixed_today():
    return date(2026, 10, 19)
