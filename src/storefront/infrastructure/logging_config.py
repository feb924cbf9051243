"""Centralized logging configuration.

Usage:
    import logging
    logger = logging.getLogger(__name__)

The CLI calls ``configure_logging`` once at startup.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.WARNING)


def configure_logging(level: str | int = "WARNING") -> None:
    """Install a stderr handler on the root logger unless one exists."""
    root = logging.getLogger()
    root.setLevel(_parse_level(level))

    # Only add a handler if nobody configured logging already
    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
