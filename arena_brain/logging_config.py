"""Logging configuration for the arena brain.

Configurable via environment variable:
- ARENA_BRAIN_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL. Default: INFO

Per-tick decisions are logged at DEBUG, so the host usually keeps INFO.

Usage:
    from arena_brain.logging_config import configure_logging
    configure_logging()  # Call once at host startup
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "ARENA_BRAIN_LOG_LEVEL"
ROOT_LOGGER_NAME = "arena_brain"

_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def get_log_level() -> int:
    """Get log level from environment.

    Returns:
        Logging level constant; INFO when unset or unrecognized.
    """
    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return level_map.get(level_name, logging.INFO)


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Calling it again only updates the level; no second handler is added.

    Args:
        level: Log level. If None, reads from the environment.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = get_log_level()

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if not any(getattr(h, "_arena_brain", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._arena_brain = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root

