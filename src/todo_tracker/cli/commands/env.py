import logging

import click
from dotenv import find_dotenv, load_dotenv

from ...common.logging_config import resolve_log_level, setup_colored_logging


def load_environment(system_env: bool) -> str:
    """Load the nearest .env file unless told to use the process environment only.

    Returns the path that was loaded, or an empty string.
    """
    if system_env:
        return ""
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(dotenv_path=env_path, override=True)
    return env_path


def configure_logging(level_name: str | None) -> logging.Logger:
    setup_colored_logging(level=resolve_log_level(level_name))
    return logging.getLogger("todo_tracker.cli")


def report_environment(log: logging.Logger, system_env: bool, env_path: str) -> None:
    if system_env:
        log.warning("Skipping .env file loading due to --system-env flag.")
    elif not env_path:
        log.warning(".env file not found in the current directory or parent directories. Proceeding without loading .env.")
    else:
        log.info("Loaded environment variables from: %s", env_path)


system_env_option = click.option(
    "-u",
    "--system-env",
    is_flag=True,
    default=False,
    help="Use system environment variables only; do not load .env file.",
)
