"""
Unit tests for the in-memory and SQLAlchemy todo and user repositories.

Both implementations run the same contract tests; the SQLAlchemy one uses an
in-memory SQLite database whose schema is created by the alembic migrations.
"""

from datetime import date

import pytest

from todo_tracker.webapp import dependencies
from todo_tracker.webapp.migrations import upgrade_to_head
from todo_tracker.webapp.repository import (
    InMemoryTodoRepository,
    InMemoryUserRepository,
    TodoRepository,
    UserRepository,
)


@pytest.fixture
def db_session():
    engine = dependencies.init_database("sqlite://")
    upgrade_to_head(engine)
    session = dependencies.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(params=["memory", "sqlite"])
def todo_repository(request):
    if request.param == "memory":
        return InMemoryTodoRepository()
    return TodoRepository(request.getfixturevalue("db_session"))


@pytest.fixture(params=["memory", "sqlite"])
def user_repository(request):
    if request.param == "memory":
        return InMemoryUserRepository()
    return UserRepository(request.getfixturevalue("db_session"))


class TestTodoRepositoryContract:
    def test_create_assigns_uuid_and_keeps_fields(self, todo_repository):
        todo = todo_repository.create_todo(
            owner_id="42", task="water plants", creation_date=100, due_date=date(2026, 10, 20)
        )

        assert len(todo.id) == 36
        assert todo.task == "water plants"
        assert todo.creation_date == 100
        assert todo.due_date == date(2026, 10, 20)
        assert todo.completed is False
        assert todo.owner_id == "42"

    def test_list_ordered_by_creation_date(self, todo_repository):
        todo_repository.create_todo(owner_id=None, task="second", creation_date=200)
        todo_repository.create_todo(owner_id=None, task="first", creation_date=100)

        assert [t.task for t in todo_repository.list_todos(None)] == ["first", "second"]

    def test_list_scoped_by_owner(self, todo_repository):
        todo_repository.create_todo(owner_id="alice", task="mine", creation_date=1)
        todo_repository.create_todo(owner_id="bob", task="theirs", creation_date=2)

        assert [t.task for t in todo_repository.list_todos("alice")] == ["mine"]
        assert len(todo_repository.list_todos(None)) == 2

    def test_update_changes_only_given_fields(self, todo_repository):
        todo = todo_repository.create_todo(
            owner_id="42", task="draft", creation_date=1, due_date=date(2026, 10, 20)
        )

        updated = todo_repository.update_todo(todo.id, "42", {"completed": True})

        assert updated.completed is True
        assert updated.task == "draft"
        assert updated.due_date == date(2026, 10, 20)

    def test_update_ignores_owner_change(self, todo_repository):
        todo = todo_repository.create_todo(owner_id="42", task="draft", creation_date=1)
        updated = todo_repository.update_todo(todo.id, "42", {"owner_id": "other"})
        assert updated.owner_id == "42"

    def test_update_unknown_returns_none(self, todo_repository):
        assert todo_repository.update_todo("0b0d7f4e-3c1a-4a5e-9d1b-2f6c9b1e7a10", None, {"task": "x"}) is None

    def test_update_other_owners_todo_returns_none(self, todo_repository):
        todo = todo_repository.create_todo(owner_id="alice", task="mine", creation_date=1)
        assert todo_repository.update_todo(todo.id, "bob", {"task": "hijack"}) is None
        assert todo_repository.list_todos("alice")[0].task == "mine"

    def test_delete_twice(self, todo_repository):
        todo = todo_repository.create_todo(owner_id=None, task="gone", creation_date=1)
        assert todo_repository.delete_todo(todo.id, None) is True
        assert todo_repository.delete_todo(todo.id, None) is False
        assert todo_repository.list_todos(None) == []

    def test_delete_other_owners_todo(self, todo_repository):
        todo = todo_repository.create_todo(owner_id="alice", task="mine", creation_date=1)
        assert todo_repository.delete_todo(todo.id, "bob") is False
        assert len(todo_repository.list_todos("alice")) == 1


class TestUserRepositoryContract:
    def test_find_unknown(self, user_repository):
        assert user_repository.find_by_github_id("123") is None

    def test_upsert_creates_then_updates(self, user_repository):
        created = user_repository.upsert_github_user("123", "octocat", "The Octocat", "https://a/1")
        assert created.github_id == "123"
        assert created.updated_at is None

        updated = user_repository.upsert_github_user("123", "octocat2", "", "")

        assert updated.id == created.id
        assert updated.username == "octocat2"
        assert updated.display_name == "The Octocat"
        assert updated.updated_at is not None
        assert user_repository.find_by_github_id("123").username == "octocat2"
