"""Configuration utilities: log level and structlog setup."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, Optional

import structlog

DEFAULT_LOG_LEVEL = "INFO"
PACKAGE_LOGGER = "who_bmi"
CONSOLE_HANDLER_NAME = "who_bmi.console"


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Level from LOG_LEVEL env var (upper-cased), defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_logger(name: str) -> Any:
    """
    Get a structlog logger backed by the stdlib logger ``name``.

    Events pass through structlog's processors and end up in stdlib
    logging, which stays silent until the host application (or
    ``configure_logging()``) attaches a handler.
    """
    return structlog.wrap_logger(logging.getLogger(name))


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure structlog for console output.

    Events below ``level`` are dropped. Unknown level names fall back
    to INFO. Output goes to stdout through a handler on the
    ``who_bmi`` stdlib logger; calling again replaces that handler.

    Args:
        level: Level name such as "DEBUG"; defaults to ``get_log_level()``

    Example:
        >>> configure_logging("DEBUG")
        >>> calculate_bmi_simple(70, 1.75)  # logs "Calculated BMI"
    """
    name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, name, logging.INFO)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(CONSOLE_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == CONSOLE_HANDLER_NAME:
            package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
