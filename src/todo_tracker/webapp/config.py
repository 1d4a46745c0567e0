"""
Configuration for the todo-tracker web application.

This module defines the configuration options for:
- Database connection
- GitHub OAuth login
- Session cookies
- HTTP server and static frontend
"""

import os
from pathlib import Path
from typing import List, Mapping, Optional

from pydantic import BaseModel, Field

DEFAULT_STATIC_DIR = str(Path(__file__).parent / "static")
SESSION_MAX_AGE_SECONDS = 7 * 24 * 60 * 60

TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(env: Mapping[str, str], name: str, default: bool = False) -> bool:
    value = env.get(name)
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in TRUE_VALUES


class DatabaseConfig(BaseModel):
    """Database configuration."""

    url: Optional[str] = Field(
        default=None,
        description="SQLAlchemy database URL; None keeps todos in memory"
    )
    run_migrations: bool = Field(
        default=True,
        description="Run alembic migrations to head on startup"
    )


class GitHubOAuthConfig(BaseModel):
    """GitHub OAuth application credentials."""

    client_id: str = Field(default="", description="GitHub OAuth client id")
    client_secret: str = Field(default="", description="GitHub OAuth client secret")
    callback_url: str = Field(
        default="http://localhost:3000/auth/github/callback",
        description="Redirect URI registered with the GitHub OAuth app"
    )
    scope: str = Field(default="read:user", description="Requested OAuth scope")

    @property
    def is_configured(self) -> bool:
        return bool(self.client_id and self.client_secret)


class SessionConfig(BaseModel):
    """Signed session cookie settings."""

    secret_key: str = Field(default="dev-session-secret", description="Cookie signing key")
    cookie_name: str = Field(default="sid")
    max_age_seconds: int = Field(default=SESSION_MAX_AGE_SECONDS)
    same_site: str = Field(default="lax")
    https_only: bool = Field(default=False)


class TodoAppConfig(BaseModel):
    """Top-level application configuration."""

    use_authorization: bool = Field(
        default=False,
        description="Require a GitHub login and scope todos by owner"
    )
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000)
    base_url: str = Field(default="http://localhost:3000")
    production: bool = Field(default=False)
    cors_allowed_origins: List[str] = Field(default_factory=list)
    static_dir: str = Field(default=DEFAULT_STATIC_DIR)
    log_level: str = Field(default="INFO")
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    github: GitHubOAuthConfig = Field(default_factory=GitHubOAuthConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "TodoAppConfig":
        """
        Build the configuration from environment variables.

        Environment Variables:
            DATABASE_URL: SQLAlchemy URL (default: unset, in-memory storage)
            RUN_MIGRATIONS: Upgrade the schema on startup (default: true)
            USE_AUTHORIZATION: Require GitHub login (default: false)
            SESSION_SECRET: Session cookie signing key
            GITHUB_CLIENT_ID / GITHUB_CLIENT_SECRET: OAuth app credentials
            BASE_URL: Public URL of the app (default: http://localhost:PORT)
            GITHUB_CALLBACK_URL: OAuth redirect URI (default: BASE_URL/auth/github/callback)
            HOST / PORT: Bind address (default: 127.0.0.1:3000)
            ENVIRONMENT: 'production' enables https-only cookies
            CORS_ALLOWED_ORIGINS: Comma separated origins
            STATIC_DIR: Frontend directory
            LOG_LEVEL: Logging level name (default: INFO)
        """
        if env is None:
            env = os.environ

        port = int(env.get("PORT") or 3000)
        base_url = (env.get("BASE_URL") or f"http://localhost:{port}").rstrip("/")
        production = (env.get("ENVIRONMENT") or "").strip().lower() == "production"
        origins = [
            origin.strip()
            for origin in (env.get("CORS_ALLOWED_ORIGINS") or "").split(",")
            if origin.strip()
        ]

        return cls(
            use_authorization=_env_flag(env, "USE_AUTHORIZATION"),
            host=env.get("HOST") or "127.0.0.1",
            port=port,
            base_url=base_url,
            production=production,
            cors_allowed_origins=origins,
            static_dir=env.get("STATIC_DIR") or DEFAULT_STATIC_DIR,
            log_level=env.get("LOG_LEVEL") or "INFO",
            database=DatabaseConfig(
                url=env.get("DATABASE_URL") or None,
                run_migrations=_env_flag(env, "RUN_MIGRATIONS", default=True),
            ),
            github=GitHubOAuthConfig(
                client_id=env.get("GITHUB_CLIENT_ID") or "",
                client_secret=env.get("GITHUB_CLIENT_SECRET") or "",
                callback_url=env.get("GITHUB_CALLBACK_URL")
                or f"{base_url}/auth/github/callback",
            ),
            session=SessionConfig(
                secret_key=env.get("SESSION_SECRET") or "dev-session-secret",
                https_only=production,
            ),
        )
