"""Package logging for disjointpaths.

All modules log through children of the ``disjointpaths`` logger, which owns
the only handler. Child loggers stay at NOTSET, so a single call to
``set_global_log_level`` (or the ``DISJOINTPATHS_LOG_LEVEL`` environment
variable at import time) controls the whole package. Flow and enumeration
internals log at DEBUG only; the CLI reports progress at INFO.
"""

import logging
import os
import sys
from typing import Optional

#: Name of the package root logger.
PACKAGE_LOGGER = "disjointpaths"

#: Environment variable holding a level name such as ``DEBUG`` or ``WARNING``.
LOG_LEVEL_ENV = "DISJOINTPATHS_LOG_LEVEL"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def env_log_level(default: int = logging.INFO) -> int:
    """Return the level named by ``DISJOINTPATHS_LOG_LEVEL``, or ``default``.

    Unknown names fall back to ``default``.
    """
    env_level = os.getenv(LOG_LEVEL_ENV)
    if not env_level:
        return default
    level_value = getattr(logging, env_level.strip().upper(), None)
    return level_value if isinstance(level_value, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Give the package logger its handler, once.

    Later calls do nothing until ``reset_logging``.

    Args:
        level: Package level; defaults to ``env_log_level()``.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Destination; defaults to a stdout ``StreamHandler``.
    """
    global _configured

    if _configured:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(env_log_level() if level is None else level)

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # caplog listens on the root logger
    package_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass ``__name__``).

    The logger has no handler of its own and level NOTSET, so records flow to
    the package logger and obey its level.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Apply ``level`` to the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Switch the package to DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Switch the package back to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the package handler and level so tests can reconfigure."""
    global _configured
    _configured = False

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
