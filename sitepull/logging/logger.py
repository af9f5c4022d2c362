# sitepull/logging/logger.py
"""
Unified logging setup for sitepull.

All modules use:
    from sitepull.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in the CLI entrypoint, via configure_logging().
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stderr,
) -> None:
    """
    Configure the root logging handler.

    Safe to call multiple times; only the level changes after the first call.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Do NOT configure logging here.
    """
    return logging.getLogger(name)
