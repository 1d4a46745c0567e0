import os

import click

from ...webapp.migrations import upgrade_database_url
from .env import configure_logging, load_environment, report_environment, system_env_option


@click.command(name="migrate")
@click.option(
    "--database-url",
    default=None,
    help="SQLAlchemy database URL (default: DATABASE_URL).",
)
@system_env_option
def migrate(database_url: str | None, system_env: bool):
    """Upgrade the database schema to the latest revision."""
    env_path = load_environment(system_env)
    log = configure_logging(os.getenv("LOG_LEVEL"))
    report_environment(log, system_env, env_path)

    database_url = database_url or os.getenv("DATABASE_URL")
    if not database_url:
        log.error("No database URL given; set DATABASE_URL or pass --database-url.")
        raise click.exceptions.Exit(1)

    upgrade_database_url(database_url)
    log.info("Migrations complete.")
