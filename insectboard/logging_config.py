"""Centralized logging configuration for the command line entry point."""

from __future__ import annotations

import logging
import os

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
LEVEL_ENV_VAR = "INSECTBOARD_LOG_LEVEL"


def configure_logging(
    *,
    level: str | None = None,
    default_level: str = "WARNING",
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Logger:
    """Configure logging for the ``insectboard`` package.

    Args:
        level: Optional explicit log level.  Falls back to the
            ``INSECTBOARD_LOG_LEVEL`` env var, then ``default_level``.
        default_level: Level used when nothing else is set.
        format: Log format string.
        datefmt: Date format string.

    Returns:
        The package logger (``insectboard``).
    """
    raw_level = level if level is not None else os.getenv(LEVEL_ENV_VAR)
    resolved_level = (raw_level or default_level).upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger("insectboard")
    app_logger.setLevel(resolved_level)
    app_logger.debug("Logging configured at %s", resolved_level)
    return app_logger
