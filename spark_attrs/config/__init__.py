"""Centralized configuration management for spark-attrs.

Example:
    >>> from spark_attrs.config import EnvVar, get_environment
    >>> get_environment(EnvVar.LOG_UNKNOWN)
    False

Environment Variable Categories:
    logging: Log level and verbosity switches
"""

from .lib import EnvConfig, EnvVar, get_environment

__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    # Main interface
    "get_environment",
]
