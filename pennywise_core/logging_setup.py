"""Logging configuration for the ``pennywise_core`` package.

- ``configure_logging(...)`` attaches a single ``StreamHandler`` to the package
  root logger. Entrypoints (the CLI) call it once at startup.
- ``get_logger(name)`` returns a logger and makes sure the package root logger
  has a ``NullHandler`` when nothing has been configured yet.

Library modules never attach handlers of their own.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Optional, Union

_PKG_LOGGER_NAME = "pennywise_core"
_CONFIGURED = False


def _coerce_level(level: Optional[Union[int, str]]) -> Optional[int]:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return None


def _parse_level(level: Optional[Union[int, str]]) -> int:
    resolved = _coerce_level(level)
    if resolved is None:
        resolved = _coerce_level(os.getenv("PENNYWISE_LOG_LEVEL"))
    return logging.INFO if resolved is None else resolved


def configure_logging(
    level: Optional[Union[int, str]] = None,
    *,
    fmt: Optional[str] = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package root logger exactly once.

    ``level`` may be an ``int`` or a level name. When ``None`` (or not a
    recognised name) the ``PENNYWISE_LOG_LEVEL`` environment variable is used,
    falling back to ``INFO``.
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
