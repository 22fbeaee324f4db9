"""
Logging setup for the README Generator.

stdout carries the MCP stream, so every record goes to stderr.
"""

import logging
import sys
from typing import Optional

from .config import DEFAULT_LOG_LEVEL

LOG_FORMAT = "[%(name)s] %(levelname)s: %(message)s"

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Marks the handler we installed so repeated calls replace it
_HANDLER_ATTR = "_readme_generator_handler"


def parse_level(level: Optional[str]) -> int:
    """Map a level name to a logging constant, falling back to INFO."""
    if not level:
        return _LEVEL_MAP[DEFAULT_LOG_LEVEL]
    return _LEVEL_MAP.get(level.strip().upper(), logging.INFO)


def configure_logging(level: Optional[str] = None, stream=None) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Args:
        level: Level name ("DEBUG", "INFO", ...). Unknown names mean INFO.
        stream: Target stream. Defaults to sys.stderr.

    Returns:
        The configured "readme_generator" logger
    """
    root = logging.getLogger("readme_generator")
    root.setLevel(parse_level(level))

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)
    root.propagate = False

    return root
