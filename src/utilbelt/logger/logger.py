"""Global logger configuration for the utilbelt package."""

import logging
import sys

from utilbelt.core.config import settings

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "utilbelt",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically package or module name)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to
            the ``LOG_LEVEL`` setting.
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(name)

    # Only configure if not already configured; handlers attached by other
    # tools (capture, file sinks) do not count
    configured = any(
        type(handler) is logging.StreamHandler and handler.stream is sys.stdout
        for handler in logger.handlers
    )
    if not configured:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False

    return logger


# Create default logger instance for the package
logger = setup_logger()
