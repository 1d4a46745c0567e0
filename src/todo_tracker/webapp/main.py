import logging
import os
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.middleware.sessions import SessionMiddleware
from starlette.staticfiles import StaticFiles

from .. import __version__
from ..shared.exceptions import register_exception_handlers
from . import dependencies
from .config import TodoAppConfig
from .migrations import upgrade_to_head
from .routers import auth, todos

log = logging.getLogger(__name__)


def create_app(config: Optional[TodoAppConfig] = None) -> FastAPI:
    """
    Build the todo-tracker application.

    Args:
        config: Application configuration. Read from the environment when None.

    Module-level dependency state is reset first, so the factory can be
    called repeatedly (e.g. once per test).
    """
    if config is None:
        config = TodoAppConfig.from_env()

    app = FastAPI(
        title="Todo Tracker",
        version=__version__,
        description="Personal task tracking with due dates.",
    )

    dependencies.reset()
    dependencies.configure(config)
    _setup_database(config)

    _setup_middleware(app, config)
    _setup_routers(app, config)
    register_exception_handlers(app)
    _setup_static_files(app, config)

    log.info(
        "Todo Tracker configured (authorization %s, storage %s)",
        "enabled" if config.use_authorization else "disabled",
        "database" if config.database.url else "in-memory",
    )
    return app


def _setup_database(config: TodoAppConfig) -> None:
    if not config.database.url:
        return
    if not config.database.run_migrations:
        log.info("Skipping database migrations (disabled by configuration)")
        return
    try:
        upgrade_to_head(dependencies.engine)
    except Exception as e:
        log.error("Database migration failed: %s", e)
        raise


def _setup_middleware(app: FastAPI, config: TodoAppConfig) -> None:
    if config.cors_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
        log.info("CORSMiddleware added with origins: %s", config.cors_allowed_origins)

    if config.use_authorization and config.session.secret_key == "dev-session-secret":
        log.warning("SESSION_SECRET is not set; using the development session secret")

    app.add_middleware(
        SessionMiddleware,
        secret_key=config.session.secret_key,
        session_cookie=config.session.cookie_name,
        max_age=config.session.max_age_seconds,
        same_site=config.session.same_site,
        https_only=config.session.https_only,
    )
    log.info("SessionMiddleware added.")


def _setup_routers(app: FastAPI, config: TodoAppConfig) -> None:
    app.include_router(todos.router, tags=["Todos"])
    if config.use_authorization:
        app.include_router(auth.router, tags=["Auth"])
        log.info("GitHub OAuth routes mounted (callback: %s)", config.github.callback_url)

    static_dir = config.static_dir

    @app.get("/", include_in_schema=False)
    async def index(request: Request):
        """Serve the app to logged-in users and the login page to everyone else."""
        page = "index.html"
        if config.use_authorization and dependencies.get_session_user(request) is None:
            page = "login.html"
        path = os.path.join(static_dir, page)
        if not os.path.isfile(path):
            return JSONResponse(status_code=404, content={"error": "Frontend not found"})
        return FileResponse(path)

    @app.get("/health", tags=["Health"])
    async def health():
        """Basic health check endpoint."""
        return {"status": "Todo Tracker is running"}


def _setup_static_files(app: FastAPI, config: TodoAppConfig) -> None:
    static_dir = config.static_dir
    if not os.path.isdir(static_dir):
        log.warning(
            "Static files directory '%s' not found. Frontend will not be served.",
            static_dir,
        )
        return
    app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    log.info("Mounted static files directory '%s' at '/'", static_dir)
