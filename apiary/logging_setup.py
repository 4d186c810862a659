"""
Logging configuration for the apiary package logger.

Modules log through ``logging.getLogger(__name__)``; the application
installs handlers once at startup via configure_logging.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import LOG_FORMAT

PACKAGE_LOGGER = "apiary"


def _handler_uses_path(handler: logging.Handler, path: Path) -> bool:
    """Check whether a handler already writes to the given path."""
    file_name = getattr(handler, "baseFilename", None)
    if not file_name:
        return False
    try:
        return Path(file_name).resolve() == path
    except OSError:
        return False


def _has_stream_handler(logger: logging.Logger) -> bool:
    return any(
        type(handler) is logging.StreamHandler for handler in logger.handlers
    )


def configure_logging(level: str = "WARNING", log_path: Path | str | None = None) -> logging.Logger:
    """
    Configure the package logger.

    Installs a stream handler and, when ``log_path`` is given, a file
    handler. Safe to call repeatedly; handlers are never duplicated.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    formatter = logging.Formatter(LOG_FORMAT)

    if not _has_stream_handler(logger):
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path is not None:
        path = Path(log_path).expanduser().resolve()
        if not any(_handler_uses_path(existing, path) for existing in logger.handlers):
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(path, encoding="utf-8")
            except OSError:
                logger.warning("Could not open log file %s", path)
            else:
                file_handler.setFormatter(formatter)
                logger.addHandler(file_handler)

    logger.debug("Logging configured at level %s", logging.getLevelName(logger.level))
    return logger
