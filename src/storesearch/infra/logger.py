"""
Logging setup for StoreSearch.

Library modules only create ``logging.getLogger(__name__)`` loggers; this
module attaches handlers to the package logger for applications and the CLI.
"""

from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from storesearch.infra.paths import PACKAGE_NAME

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONSOLE_FORMAT = "[%(levelname)s] %(message)s"


def setup_logging(
    log_level: str = "INFO",
    log_dir: str | Path | None = None,
    *,
    console: bool = True,
) -> logging.Logger:
    """Configure the ``storesearch`` package logger.

    Existing handlers are removed first, so calling this repeatedly does not
    duplicate output.

    Args:
        log_level: Level name such as ``"DEBUG"`` or ``"INFO"``.
        log_dir: Optional directory for a daily-rotated ``storesearch.log``.
        console: Whether to log to stderr.

    Returns:
        The configured package logger.

    Raises:
        ValueError: If ``log_level`` is not a known level name.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")

    logger = logging.getLogger(PACKAGE_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if console:
        stream = logging.StreamHandler()
        stream.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(stream)

    if log_dir is not None:
        path = Path(log_dir).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            path / f"{PACKAGE_NAME}.log",
            when="midnight",
            backupCount=7,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger
