"""Logging setup for the command line entry points.

Library code only calls ``logging.getLogger(__name__)``; handlers are
attached here. Calling setup_logging() again updates the existing handlers
instead of adding duplicates.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

_CONSOLE_HANDLER_NAME = "unoengine_console"
_FILE_HANDLER_NAME = "unoengine_file"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"


_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    return _LEVELS.get(level.strip().upper(), logging.INFO)


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    enable_console: bool = True,
    max_bytes: int = 2 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """Configure the ``unoengine`` logger and return it."""
    logger = logging.getLogger("unoengine")
    logger.setLevel(_parse_level(level))
    fmt = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    existing = {h.name: h for h in logger.handlers}

    if enable_console:
        console = existing.get(_CONSOLE_HANDLER_NAME)
        if console is None:
            console = logging.StreamHandler()
            console.name = _CONSOLE_HANDLER_NAME
            logger.addHandler(console)
        console.setFormatter(fmt)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = existing.get(_FILE_HANDLER_NAME)
        if file_handler is None:
            file_handler = RotatingFileHandler(
                str(path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
            file_handler.name = _FILE_HANDLER_NAME
            logger.addHandler(file_handler)
        file_handler.setFormatter(fmt)

    return logger
