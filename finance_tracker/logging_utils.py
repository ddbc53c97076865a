"""Mini README: Application-wide logging helpers for the finance tracker.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - attaches the console handler and sets the level.

Usage:
    Modules import ``get_logger`` and keep a module level ``LOGGER``. The CLI
    calls ``configure_root_logger`` with the configured level once settings
    are known; the handler is only attached the first time so repeated calls
    merely adjust the level.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger, attaching the stream handler exactly once."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = level.strip().upper()
    root_logger.setLevel(level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring a handler is present."""

    if not _LOGGER_INITIALISED:
        configure_root_logger(logging.WARNING)
    return logging.getLogger(name)
