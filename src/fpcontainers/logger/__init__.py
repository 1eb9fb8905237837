"""Logging setup for fpcontainers."""

from fpcontainers.logger.logger import get_logger, logger, setup_logger

__all__ = ["logger", "get_logger", "setup_logger"]
