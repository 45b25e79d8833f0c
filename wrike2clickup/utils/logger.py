"""Shared logger initialization for the converter.

Usage:
    from wrike2clickup.utils.logger import get_logger
    log = get_logger(__name__)
    log.info("message")
"""
from __future__ import annotations

import logging
from typing import Optional

from rich.logging import RichHandler

_FORMAT = "%(message)s"  # rich handler already adds time & level


def _rich_handler() -> Optional[logging.Handler]:
    root = logging.getLogger()
    for handler in root.handlers:
        if isinstance(handler, RichHandler):
            return handler
    return None


def configure_logging(level: int = logging.INFO) -> None:
    """Idempotently configure the root logger with a rich handler.

    Calling it again only adjusts the level.
    """
    root = logging.getLogger()
    handler = _rich_handler()
    if handler is None:
        handler = RichHandler(rich_tracebacks=True, markup=False, show_path=False)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
    handler.setLevel(level)


def parse_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def get_logger(name: str = __name__) -> logging.Logger:
    """Return a module-level logger."""
    return logging.getLogger(name)
