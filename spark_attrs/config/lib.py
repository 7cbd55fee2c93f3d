"""Centralized environment configuration management for spark-attrs.

Provides a unified interface for all environment variables with:
- Single `get_environment()` function for all configuration
- Type-safe enum with metadata (default, type, description)
- Consistent resolution: override > environment > default

Example:
    >>> from spark_attrs.config import EnvVar, get_environment
    >>>
    >>> level = get_environment(EnvVar.LOG_LEVEL)  # Returns str
    >>> loud = get_environment(EnvVar.LOG_UNKNOWN, override=True)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "SPARK_ATTRS_LOG_LEVEL").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, bool).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by spark-attrs.

    Categories:
        - logging: Log level and verbosity switches
    """

    LOG_LEVEL = EnvConfig(
        name="SPARK_ATTRS_LOG_LEVEL",
        default="WARNING",
        var_type=str,
        description="Level applied by setup_logging() when none is given",
        category="logging",
    )
    LOG_UNKNOWN = EnvConfig(
        name="SPARK_ATTRS_LOG_UNKNOWN",
        default=False,
        var_type=bool,
        description="Log dropped unknown attributes at WARNING instead of DEBUG",
        category="logging",
    )


# =============================================================================
# Type Conversion Helpers
# =============================================================================


def _parse_bool(value: str) -> bool | None:
    """Parse string to boolean.

    Recognizes: true/false, 1/0, yes/no (case-insensitive).
    Returns None for unrecognized values.
    """
    normalized = value.lower().strip()
    if normalized in ("true", "1", "yes"):
        return True
    if normalized in ("false", "0", "no"):
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert string value to target type.

    Args:
        value: Raw string value from environment (or None).
        var_type: Target Python type.
        default: Default value if conversion fails or value is None.

    Returns:
        Converted value or default.
    """
    if value is None:
        return default

    if var_type is str:
        return value

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Get environment variable value with type conversion.

    Resolution priority:
        1. Explicit override parameter (highest)
        2. Environment variable value
        3. Default from EnvConfig (lowest)

    Args:
        env_var: Environment variable enum member.
        override: Optional override value (bypasses env lookup).

    Returns:
        Value converted to the appropriate type.

    Example:
        >>> get_environment(EnvVar.LOG_LEVEL)
        'WARNING'
        >>> get_environment(EnvVar.LOG_UNKNOWN, override=True)
        True
    """
    config: EnvConfig = env_var.value

    if override is not None:
        return override

    raw_value = os.environ.get(config.name)
    return _convert_value(raw_value, config.var_type, config.default)


__all__ = [
    "EnvConfig",
    "EnvVar",
    "get_environment",
]
