"""Mini README: Application-wide logging helpers for the financial tracker.

Structure:
    * configure_root_logger - installs the shared handler and sets the level.
    * get_logger - factory returning module loggers under that configuration.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)`` at import time. The
    launcher calls ``configure_root_logger`` again with the level chosen by the
    settings; the handler is installed only once, later calls just adjust the
    level so reloads in development do not duplicate output.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER: Optional[logging.Handler] = None


def configure_root_logger(level: int = logging.INFO) -> None:
    """Attach the tracker's stream handler to the root logger and set its level."""

    global _HANDLER
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if _HANDLER is not None:
        return

    _HANDLER = logging.StreamHandler()
    _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(_HANDLER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
