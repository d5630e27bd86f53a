"""Logging helpers for bodyfile.

Library modules only call ``get_logger``; handlers are installed by the
command line through ``configure_logging``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

LEVEL_ENV = "BODYFILE_LOG_LEVEL"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: str | int | None = None) -> int:
    """Turn a level name or number into a logging level.

    Falls back to ``BODYFILE_LOG_LEVEL``, then WARNING.

    Raises:
        ValueError: if the name is not a known level.
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV) or "WARNING"
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown log level: {level!r}")
    return value


def configure_logging(level: str | int | None = None, stream: TextIO | None = None) -> None:
    """Configure the root logger with a single plain-text handler.

    Logs go to stderr unless another stream is given; stdout is reserved
    for bodyfile output.
    """
    resolved = resolve_level(level)
    logging.captureWarnings(True)
    root = logging.getLogger()
    root.setLevel(resolved)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.handlers = [handler]


def get_logger(name: str = "bodyfile") -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "resolve_level"]
