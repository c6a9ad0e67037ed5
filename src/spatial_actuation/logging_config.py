"""
Logging configuration.

The library only creates module loggers under the ``spatial_actuation``
namespace; applications call :func:`setup_logging` to get output. Handlers
installed here are tagged so a later call replaces them without touching
handlers the application attached itself.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

PACKAGE_LOGGER = "spatial_actuation"

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_OWNED = "_spatial_actuation_owned"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"unknown logging level: {level}")
    return value


def _own(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
    setattr(handler, _OWNED, True)
    return handler


def setup_logging(
    level: int | str = logging.INFO,
    log_file: str | None = None,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """
    Configure the ``spatial_actuation`` package logger.

    Args:
        level: Logging level, as a number or a name such as "DEBUG".
        log_file: Optional path to also write logs to (overwritten).
        stream: Console stream; stdout when omitted.
    """
    lvl = _coerce_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(lvl)

    for handler in list(logger.handlers):
        if getattr(handler, _OWNED, False):
            logger.removeHandler(handler)
            handler.close()

    logger.addHandler(_own(logging.StreamHandler(stream or sys.stdout), lvl))
    if log_file:
        logger.addHandler(_own(logging.FileHandler(log_file, mode="w", encoding="utf-8"), lvl))

    logger.debug("logging configured at %s", logging.getLevelName(lvl))
    return logger
