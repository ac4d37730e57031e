"""Logger configuration for the Maia project.

The package logger only carries a :class:`logging.NullHandler`, so records
reach whatever handlers the application configures and are silent otherwise.
Applications that want Maia's own console output call :func:`setup_logger`.
"""

import logging
import sys

from maia.core.config import settings, to_log_level

__all__ = ["logger", "setup_logger"]


def setup_logger(
    name: str = "maia",
    level: str | int | None = None,
    format_string: str | None = None,
    null_handler: bool = False,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (typically project name)
        level: Log level name (DEBUG, WARN, ...) or number. Defaults to the
            configured ``LOG_LEVEL``.
        format_string: Custom format string
        null_handler: Attach a ``NullHandler`` and keep propagation instead of
            writing to stdout. Used for the package's own logger.

    Returns:
        Configured logger instance

    Raises:
        ValueError: If ``level`` is not a known logging level.
    """
    level = settings.LOG_LEVEL if level is None else to_log_level(level)

    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        if null_handler:
            logger.addHandler(logging.NullHandler())
        else:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter(
                    fmt=format_string or settings.LOG_FORMAT,
                    datefmt=settings.LOG_DATEFMT,
                )
            )
            logger.addHandler(handler)
            logger.propagate = False
        logger.setLevel(level)

    return logger


logger = setup_logger(null_handler=True)
