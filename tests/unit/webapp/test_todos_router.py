"""
Unit tests for the todos router: status mapping and error bodies with a
mocked TodoService.
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from todo_tracker.shared.exceptions import (
    EntityNotFoundError,
    ValidationError,
    register_exception_handlers,
)
from todo_tracker.webapp.dependencies import get_request_context, get_todo_service
from todo_tracker.webapp.request_context import RequestContext
from todo_tracker.webapp.routers import todos

TODO_ID = "0b0d7f4e-3c1a-4a5e-9d1b-2f6c9b1e7a10"
VIEW = {
    "id": TODO_ID,
    "task": "write tests",
    "creation_date": "2026-10-19T08:30:00.000Z",
    "due_date": "2026-10-20",
    "completed": False,
    "days_until_due": 1,
}


@pytest.fixture
def todo_service():
    service = MagicMock()
    service.list_todos.return_value = [VIEW]
    service.create_todo.return_value = [VIEW]
    service.update_todo.return_value = [VIEW]
    service.delete_todo.return_value = []
    return service


@pytest.fixture
def client(todo_service):
    app = FastAPI()
    app.include_router(todos.router)
    register_exception_handlers(app)
    app.dependency_overrides[get_todo_service] = lambda: todo_service
    app.dependency_overrides[get_request_context] = lambda: RequestContext(owner_id="1001")
    return TestClient(app, raise_server_exceptions=False)


class TestTodosRouter:
    def test_list(self, client, todo_service):
        response = client.get("/todos")

        assert response.status_code == 200
        assert response.json() == [VIEW]
        context = todo_service.list_todos.call_args.args[0]
        assert context.owner_id == "1001"

    def test_create_passes_body(self, client, todo_service):
        response = client.post("/todos", json={"task": "write tests", "due_date": "2026-10-20"})

        assert response.status_code == 200
        kwargs = todo_service.create_todo.call_args.kwargs
        assert kwargs["task"] == "write tests"
        assert kwargs["due_date"] == "2026-10-20"
        assert kwargs["creation_date"] is None

    def test_create_validation_error(self, client, todo_service):
        todo_service.create_todo.side_effect = ValidationError("Task is required")

        response = client.post("/todos", json={"task": ""})

        assert response.status_code == 400
        assert response.json() == {"error": "Task is required"}

    def test_update_sends_only_present_fields(self, client, todo_service):
        response = client.put(f"/todos/{TODO_ID}", json={"completed": True})

        assert response.status_code == 200
        args = todo_service.update_todo.call_args.args
        assert args[1] == TODO_ID
        assert args[2] == {"completed": True}

    def test_update_explicit_null_is_sent(self, client, todo_service):
        client.put(f"/todos/{TODO_ID}", json={"due_date": None})
        assert todo_service.update_todo.call_args.args[2] == {"due_date": None}

    def test_legacy_update_reads_id_from_body(self, client, todo_service):
        response = client.put("/todos", json={"id": TODO_ID, "task": "renamed"})

        assert response.status_code == 200
        args = todo_service.update_todo.call_args.args
        assert args[1] == TODO_ID
        assert args[2] == {"task": "renamed"}

    def test_update_not_found(self, client, todo_service):
        todo_service.update_todo.side_effect = EntityNotFoundError("todo", TODO_ID)

        response = client.put(f"/todos/{TODO_ID}", json={"completed": True})

        assert response.status_code == 404
        assert response.json() == {"error": f"No todo with ID {TODO_ID}"}

    def test_delete(self, client, todo_service):
        response = client.delete(f"/todos/{TODO_ID}")

        assert response.status_code == 200
        assert response.json() == []

    def test_legacy_delete(self, client, todo_service):
        response = client.request("DELETE", "/todos", json={"id": TODO_ID})

        assert response.status_code == 200
        assert todo_service.delete_todo.call_args.args[1] == TODO_ID

    def test_invalid_json_body(self, client):
        response = client.post(
            "/todos", content=b"{", headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    @pytest.mark.parametrize(
        "method, url, service_method, message",
        [
            ("GET", "/todos", "list_todos", "Failed to fetch todos"),
            ("GET", "/todos/display", "get_display", "Failed to fetch todos"),
            ("POST", "/todos", "create_todo", "Failed to add todo"),
            ("PUT", f"/todos/{TODO_ID}", "update_todo", "Failed to update todo"),
            ("DELETE", f"/todos/{TODO_ID}", "delete_todo", "Failed to delete todo"),
        ],
    )
    def test_unexpected_errors_become_generic_500(
        self, client, todo_service, method, url, service_method, message
    ):
        getattr(todo_service, service_method).side_effect = RuntimeError("disk on fire")
        body = {"task": "x"} if method in ("POST", "PUT") else None

        response = client.request(method, url, json=body)

        assert response.status_code == 500
        assert response.json() == {"error": message}
