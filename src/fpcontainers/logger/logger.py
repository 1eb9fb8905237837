"""Logger configuration for the fpcontainers library.

The package logger only carries a ``NullHandler`` and keeps propagating, so
its records reach whatever handlers the host application installs.
``setup_logger`` opts into a formatted stream handler for scripts and
debugging sessions.
"""

import logging
import sys
from typing import IO, Optional

from fpcontainers.config import settings

__all__ = ["logger", "get_logger", "setup_logger"]

# Name given to the handler setup_logger installs, used to detect it again
STREAM_HANDLER_NAME = "fpcontainers.stream"


def get_logger(name: str = "fpcontainers") -> logging.Logger:
    """Return a library logger that stays silent unless the host configures logging.

    Args:
        name: Logger name (the package name, or a dotted child of it)

    Returns:
        Logger with a ``NullHandler`` and the level from ``settings.log_level``
    """
    logger = logging.getLogger(name)
    if not any(type(h) is logging.NullHandler for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    logger.setLevel(getattr(logging, settings.log_level))
    return logger


def setup_logger(
    name: str = "fpcontainers",
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach a formatted stream handler to a logger.

    Calling it again for the same logger updates the level but never adds a
    second handler. The configured logger stops propagating so records are
    not printed twice when the root logger also has handlers.

    Args:
        name: Logger name (typically the package name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        stream: Destination stream, ``sys.stdout`` when omitted

    Returns:
        Configured logger instance
    """
    level = level or settings.log_level
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    if not any(h.get_name() == STREAM_HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(stream or sys.stdout)
        handler.set_name(STREAM_HANDLER_NAME)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False

    logger.setLevel(getattr(logging, level.upper()))
    return logger


# Default package logger; quiet until the host application configures logging
logger = get_logger()
