import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import json

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "[%(asctime)s] [%(name)s] [%(levelname)s] %(message)s"


def resolve_level(name: Optional[str]) -> Optional[int]:
    """
    Translate a level name such as ``debug`` or ``INFO`` into its number.
    :param name: Level name, case insensitive.
    :return: The numeric level, or None when logging does not know the name.
    """
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else None


def setup_logger(logger: Optional[logging.Logger] = None) -> None:
    """
    Send JSON log records to stderr.

    The level comes from ``LOG_LEVEL``. An unknown value falls back to
    WARNING with a warning record instead of failing the run. A logger that
    already has handlers keeps them.

    :param logger: Logger to configure, the root logger by default.
    :return: None
    """
    target = logger if logger is not None else logging.getLogger()
    requested = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = resolve_level(requested)
    target.setLevel(level if level is not None else DEFAULT_LOG_LEVEL)

    if not target.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(json.JsonFormatter(LOG_FORMAT))
        target.addHandler(handler)

    if level is None:
        target.warning(f"Unknown LOG_LEVEL {requested!r}, using {DEFAULT_LOG_LEVEL}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for the given module.
    :param name: The name of the logger.
    :return: Logger object.
    """
    return logging.getLogger(name)
