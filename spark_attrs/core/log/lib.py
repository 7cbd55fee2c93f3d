"""Core logging implementation for spark-attrs."""

import logging
import sys
from typing import Optional

__all__ = ["get_logger", "setup_logging"]

DEFAULT_LOGGER_NAME = "spark-attrs"


def setup_logging(level: Optional[int | str] = None, stream=sys.stderr) -> None:
    """Configure basic logging.

    Args:
        level: Logging level. Falls back to ``SPARK_ATTRS_LOG_LEVEL``.
        stream: Output stream.
    """
    if level is None:
        from spark_attrs.config import EnvVar, get_environment

        level = get_environment(EnvVar.LOG_LEVEL)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)
