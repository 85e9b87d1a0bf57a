"""Logging setup for a terminal session.

The TUI owns stdout/stderr, so records only go to a file when one is
requested; otherwise the package logger gets a ``NullHandler``.

Environment overrides:
  - LAZYFILEOPS_LOG_FILE: log file path
  - LAZYFILEOPS_LOG_LEVEL: explicit log level (name or number)
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
LOG_FILE_ENV_VAR = "LAZYFILEOPS_LOG_FILE"
LOG_LEVEL_ENV_VAR = "LAZYFILEOPS_LOG_LEVEL"
PACKAGE_LOGGER = "lazyfileops"


def coerce_level(value: str | int | None, fallback: int = logging.INFO) -> int:
    """Translate a level name or number into a ``logging`` level."""
    if value is None:
        return fallback
    if isinstance(value, int):
        return value
    text = value.strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else fallback


def configure_logging(
    log_file: Path | str | None = None,
    level: str | int | None = None,
    default_level: str | int | None = None,
) -> logging.Logger:
    """Attach exactly one handler to the package logger and return it.

    Explicit arguments win over environment variables, which win over
    ``default_level`` (typically the config file value).
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    resolved_file = log_file if log_file is not None else os.getenv(LOG_FILE_ENV_VAR) or None
    fallback = coerce_level(default_level, logging.WARNING)
    resolved_level = coerce_level(level if level is not None else os.getenv(LOG_LEVEL_ENV_VAR), fallback)

    if resolved_file is None:
        logger.addHandler(logging.NullHandler())
    else:
        path = Path(resolved_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT))
        logger.addHandler(handler)
    logger.setLevel(resolved_level)
    logger.propagate = False
    return logger


__all__ = [
    "LOG_FILE_ENV_VAR",
    "LOG_LEVEL_ENV_VAR",
    "PACKAGE_LOGGER",
    "coerce_level",
    "configure_logging",
]
