"""
Console logging for the todo-tracker server and CLI.

Level names are colored on terminals; records from the HTTP stack
(todo_tracker.webapp, uvicorn, starlette, fastapi) also get a colored
logger name so request handling stands out from startup chatter.
"""

import copy
import logging
import os
import sys
from typing import Optional, TextIO

RESET = "\033[0m"

LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}
HTTP_LOGGER_COLOR = "\033[34m"
HTTP_LOGGER_PREFIXES = ("todo_tracker.webapp", "uvicorn", "starlette", "fastapi")

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def stream_supports_color(stream: TextIO) -> bool:
    """NO_COLOR wins, then FORCE_COLOR, then whether the stream is a tty."""
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class ColoredFormatter(logging.Formatter):
    """Formatter that colors level names and HTTP-stack logger names."""

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors:
            return super().format(record)

        # Handlers share the record; color a copy.
        colored = copy.copy(record)
        level_color = LEVEL_COLORS.get(record.levelno)
        if level_color:
            colored.levelname = f"{level_color}{record.levelname}{RESET}"
        if record.name.startswith(HTTP_LOGGER_PREFIXES):
            colored.name = f"{HTTP_LOGGER_COLOR}{record.name}{RESET}"
        return super().format(colored)


def setup_colored_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    use_colors: bool = True,
) -> None:
    """
    Send all logging to stdout through a ColoredFormatter.

    Replaces any handlers already on the root logger, so calling it twice
    does not duplicate output. uvicorn's own loggers propagate to the root.

    Args:
        level: Root and handler level
        format_string: Record format (default: time, logger, level, message)
        date_format: ``asctime`` format
        use_colors: Allow colors when the terminal supports them
    """
    stream = sys.stdout
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.setFormatter(
        ColoredFormatter(
            fmt=format_string or DEFAULT_FORMAT,
            datefmt=date_format or DEFAULT_DATE_FORMAT,
            use_colors=use_colors and stream_supports_color(stream),
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = []
        uvicorn_logger.propagate = True


def resolve_log_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as 'debug' to its logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default
