"""Tests for configuration management."""

import pytest

from .lib import (
    EnvVar,
    _convert_value,
    _parse_bool,
    get_environment,
)


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("SPARK_ATTRS_LOG_LEVEL", raising=False)
        assert get_environment(EnvVar.LOG_LEVEL) == "WARNING"

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("SPARK_ATTRS_LOG_LEVEL", "DEBUG")
        assert get_environment(EnvVar.LOG_LEVEL, override="ERROR") == "ERROR"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("SPARK_ATTRS_LOG_LEVEL", "DEBUG")
        assert get_environment(EnvVar.LOG_LEVEL) == "DEBUG"

    @pytest.mark.unit
    def test_bool_type_conversion(self, monkeypatch):
        """Boolean values are parsed case-insensitively."""
        for value in ("true", "1", "yes", "TRUE"):
            monkeypatch.setenv("SPARK_ATTRS_LOG_UNKNOWN", value)
            assert get_environment(EnvVar.LOG_UNKNOWN) is True
        for value in ("false", "0", "No"):
            monkeypatch.setenv("SPARK_ATTRS_LOG_UNKNOWN", value)
            assert get_environment(EnvVar.LOG_UNKNOWN) is False

    @pytest.mark.unit
    def test_invalid_bool_falls_back_to_default(self, monkeypatch):
        """Unrecognized boolean strings use the default."""
        monkeypatch.setenv("SPARK_ATTRS_LOG_UNKNOWN", "maybe")
        assert get_environment(EnvVar.LOG_UNKNOWN) is False


class TestConversionHelpers:
    """Tests for private conversion helpers."""

    @pytest.mark.unit
    def test_parse_bool_unknown(self):
        """Unknown strings parse to None."""
        assert _parse_bool("perhaps") is None

    @pytest.mark.unit
    def test_convert_none_returns_default(self):
        """Missing values return the default."""
        assert _convert_value(None, str, "x") == "x"

    @pytest.mark.unit
    def test_convert_string_passthrough(self):
        """String variables are returned unchanged."""
        assert _convert_value("DEBUG", str, "WARNING") == "DEBUG"
