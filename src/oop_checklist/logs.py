"""Logging configuration for the checklist runner.

The package never touches the root logger. :func:`setup_logging` configures
the dedicated ``oop_checklist`` logger so that log records go to stderr and
never interleave with the numbered probe output on stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional, TextIO

LOGGER_NAME = "oop_checklist"
LOG_LEVEL_ENV = "OOP_CHECKLIST_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def level_from_env(env: Optional[Mapping[str, str]] = None) -> int:
    """Resolve the log level named by ``OOP_CHECKLIST_LOG_LEVEL``.

    Unknown or empty names fall back to :data:`DEFAULT_LOG_LEVEL`.
    """

    source = os.environ if env is None else env
    name = source.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def setup_logging(
    level: Optional[int] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure the package logger with a single stderr handler."""

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(level_from_env() if level is None else level)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
