import os

import click
import uvicorn

from ...webapp.config import TodoAppConfig
from ...webapp.main import create_app
from .env import configure_logging, load_environment, report_environment, system_env_option


@click.command(name="run")
@click.option("--host", default=None, help="Bind address (default: HOST or 127.0.0.1).")
@click.option("--port", default=None, type=int, help="Bind port (default: PORT or 3000).")
@system_env_option
def run(host: str | None, port: int | None, system_env: bool):
    """
    Serve the todo-tracker web application with uvicorn.

    Configuration comes from environment variables, optionally loaded from
    the nearest .env file.
    """
    env_path = load_environment(system_env)
    log = configure_logging(os.getenv("LOG_LEVEL"))
    report_environment(log, system_env, env_path)

    config = TodoAppConfig.from_env()
    if host:
        config.host = host
    if port:
        config.port = port

    try:
        app = create_app(config)
    except Exception as e:
        log.error("Failed to start Todo Tracker: %s", e)
        raise click.exceptions.Exit(1)

    log.info("Server listening on %s", config.base_url)
    if config.use_authorization:
        log.info("GitHub callback: %s", config.github.callback_url)

    uvicorn.run(app, host=config.host, port=config.port, log_config=None)
