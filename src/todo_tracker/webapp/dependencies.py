"""
Defines FastAPI dependency injectors to access shared resources:
configuration, database sessions, repositories, services and the
request-scoped identity.
"""
from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy import create_engine, event, pool
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import Session, sessionmaker

from ..shared.exceptions import UnauthorizedError
from .config import TodoAppConfig
from .oauth_handler import GitHubOAuthHandler
from .repository import (
    InMemoryTodoRepository,
    InMemoryUserRepository,
    ITodoRepository,
    IUserRepository,
    TodoRepository,
    UserRepository,
)
from .request_context import RequestContext
from .services.todo_service import TodoService

log = logging.getLogger(__name__)

SESSION_USER_KEY = "user"

app_config: TodoAppConfig | None = None
engine: Engine | None = None
SessionLocal: sessionmaker | None = None
in_memory_todo_repository: InMemoryTodoRepository | None = None
in_memory_user_repository: InMemoryUserRepository | None = None
oauth_handler: GitHubOAuthHandler | None = None


def init_database(database_url: str) -> Engine:
    """Initialize database with appropriate configuration based on database dialect."""
    global engine, SessionLocal
    if SessionLocal is not None:
        log.warning("Database already initialized.")
        return engine

    url = make_url(database_url)
    dialect_name = url.get_dialect().name

    engine_kwargs = {}
    if dialect_name == "sqlite":
        engine_kwargs = {
            "poolclass": pool.StaticPool,
            "connect_args": {"check_same_thread": False},
        }
        log.info("Configuring SQLite database (single-connection mode)")
    elif dialect_name in ("postgresql", "mysql"):
        engine_kwargs = {
            "pool_size": 10,
            "max_overflow": 20,
            "pool_timeout": 30,
            "pool_recycle": 1800,
            "pool_pre_ping": True,
        }
        log.info("Configuring %s database with connection pooling", dialect_name)
    else:
        log.warning("Using default configuration for dialect: %s", dialect_name)

    engine = create_engine(database_url, **engine_kwargs)

    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        if dialect_name == "sqlite":
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    log.debug("Database initialized: %s", url.render_as_string(hide_password=True))
    log.info("Database initialized successfully")
    return engine


def configure(config: TodoAppConfig) -> None:
    """Called by the application factory to provide configuration and backends."""
    global app_config, in_memory_todo_repository, in_memory_user_repository, oauth_handler
    app_config = config

    if config.database.url:
        init_database(config.database.url)
    else:
        log.warning(
            "No database URL provided - using in-memory todo storage (data not persisted across restarts)"
        )
        in_memory_todo_repository = InMemoryTodoRepository()
        in_memory_user_repository = InMemoryUserRepository()

    oauth_handler = GitHubOAuthHandler(config.github)


def reset() -> None:
    """Drop all module state so a new application can be configured."""
    global app_config, engine, SessionLocal, in_memory_todo_repository
    global in_memory_user_repository, oauth_handler
    if engine is not None:
        engine.dispose()
    app_config = None
    engine = None
    SessionLocal = None
    in_memory_todo_repository = None
    in_memory_user_repository = None
    oauth_handler = None


def get_app_config() -> TodoAppConfig:
    """FastAPI dependency to get the application configuration."""
    if app_config is None:
        log.critical("Application configuration accessed before it was set!")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Application not yet initialized.",
        )
    return app_config


def _is_connection_error(exc: Exception, _depth: int = 0) -> bool:
    """
    Check if an exception is a transient database connection error.

    Uses SQLAlchemy's connection_invalidated flag first, then the exception
    type and message, and finally walks the cause chain.
    """
    if _depth > 10:
        return False

    if getattr(exc, "connection_invalidated", False):
        return True

    exc_type_name = type(exc).__name__
    if exc_type_name == "DisconnectionError":
        return True

    is_operational_or_interface = exc_type_name in ("OperationalError", "InterfaceError")

    error_str = str(exc).lower()
    connection_error_patterns = [
        "connection reset by peer",
        "connection timed out",
        "server closed the connection unexpectedly",
        "could not connect to server",
        "connection refused",
        "unable to open database file",
        "disk i/o error",
        "lost connection to mysql server",
        "mysql server has gone away",
        "broken pipe",
        "connection already closed",
    ]
    has_connection_error_message = any(p in error_str for p in connection_error_patterns)

    if is_operational_or_interface and has_connection_error_message:
        return True

    if exc.__cause__ is not None:
        return _is_connection_error(exc.__cause__, _depth + 1)

    return False


def get_db() -> Generator[Optional[Session], None, None]:
    """Yield a database session, or None when running on in-memory storage."""
    if SessionLocal is None:
        yield None
        return

    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception as e:
        try:
            db.rollback()
        except Exception as rollback_error:
            log.warning("Failed to rollback after error: %s", rollback_error)

        if _is_connection_error(e):
            log.warning("Database connection error: %s", e)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Database connection temporarily unavailable. Please retry.",
            ) from e
        raise
    finally:
        try:
            db.close()
        except Exception as close_error:
            log.warning("Failed to close database session: %s", close_error)


def get_todo_repository(db: Optional[Session] = Depends(get_db)) -> ITodoRepository:
    """FastAPI dependency to get the todo repository for the configured backend."""
    if db is not None:
        return TodoRepository(db)
    if in_memory_todo_repository is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Todo storage not yet initialized.",
        )
    return in_memory_todo_repository


def get_user_repository(db: Optional[Session] = Depends(get_db)) -> IUserRepository:
    """FastAPI dependency to get the user repository for the configured backend."""
    if db is not None:
        return UserRepository(db)
    if in_memory_user_repository is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User storage not yet initialized.",
        )
    return in_memory_user_repository


def get_todo_service(
    todo_repository: ITodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """FastAPI dependency to get an instance of TodoService."""
    return TodoService(todo_repository)


def get_oauth_handler() -> GitHubOAuthHandler:
    if oauth_handler is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="OAuth not yet initialized.",
        )
    return oauth_handler


def get_session_user(request: Request) -> Optional[dict]:
    """The user stored in the signed session cookie, if any."""
    try:
        user = request.session.get(SESSION_USER_KEY)
    except AssertionError:
        log.debug("Could not access request.session; SessionMiddleware not installed.")
        return None
    if isinstance(user, dict) and user.get("id"):
        return user
    return None


def get_request_context(
    request: Request,
    config: TodoAppConfig = Depends(get_app_config),
) -> RequestContext:
    """
    FastAPI dependency that resolves the caller's identity.

    With authorization enabled the session must hold a logged-in user,
    otherwise the request is rejected with 401. With authorization disabled
    every caller gets an unscoped context.
    """
    if not config.use_authorization:
        return RequestContext()

    user = get_session_user(request)
    if user is None:
        log.info("Rejecting unauthenticated request: %s %s", request.method, request.url.path)
        raise UnauthorizedError()

    return RequestContext(owner_id=str(user["id"]), username=user.get("username", ""))
