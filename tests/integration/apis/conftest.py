"""
Pytest fixtures for FastAPI functional testing.

Applications are built with create_app() exactly as in production, against
either the in-memory store or an in-memory SQLite database migrated by
alembic.
"""

from typing import Callable

import pytest
from fastapi.testclient import TestClient

from todo_tracker.webapp.config import (
    DatabaseConfig,
    GitHubOAuthConfig,
    SessionConfig,
    TodoAppConfig,
)
from todo_tracker.webapp.main import create_app

BACKEND_URLS = {"memory": None, "sqlite": "sqlite://"}


def build_config(backend: str = "memory", use_authorization: bool = False, **overrides) -> TodoAppConfig:
    return TodoAppConfig(
        use_authorization=use_authorization,
        database=DatabaseConfig(url=BACKEND_URLS[backend]),
        github=GitHubOAuthConfig(
            client_id="test-client-id",
            client_secret="test-client-secret",
            callback_url="http://testserver/auth/github/callback",
        ),
        session=SessionConfig(secret_key="test-session-secret"),
        **overrides,
    )


@pytest.fixture
def make_client() -> Callable[..., TestClient]:
    """Factory building a TestClient around a freshly created application."""
    clients = []

    def _make(backend: str = "memory", use_authorization: bool = False, **overrides) -> TestClient:
        app = create_app(build_config(backend, use_authorization, **overrides))
        client = TestClient(app, raise_server_exceptions=False)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture(params=["memory", "sqlite"])
def api_client(request, make_client) -> TestClient:
    """Unauthenticated client with authorization disabled, on each backend."""
    return make_client(backend=request.param)
