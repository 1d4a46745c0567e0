"""
Programmatic alembic migrations for the todo database.
"""

import logging
import os

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

ALEMBIC_DIR = os.path.join(os.path.dirname(__file__), "alembic")


def build_alembic_config(database_url: str | None = None) -> Config:
    alembic_cfg = Config()
    alembic_cfg.set_main_option("script_location", ALEMBIC_DIR)
    if database_url:
        alembic_cfg.set_main_option("sqlalchemy.url", database_url)
    return alembic_cfg


def upgrade_to_head(engine: Engine) -> None:
    """
    Run all migrations on one connection of the given engine.

    Sharing the connection keeps single-connection SQLite databases
    (including in-memory ones) consistent with the application's view.
    """
    alembic_cfg = build_alembic_config(engine.url.render_as_string(hide_password=False))
    with engine.begin() as connection:
        alembic_cfg.attributes["connection"] = connection
        command.upgrade(alembic_cfg, "head")
    log.info("Database schema upgraded to head")


def upgrade_database_url(database_url: str) -> None:
    engine = create_engine(database_url)
    try:
        upgrade_to_head(engine)
    finally:
        engine.dispose()
