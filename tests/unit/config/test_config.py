"""Unit tests for the configuration system.

These tests verify the core behaviors of the configuration module:
- Loading settings from environment variables and .env files.
- Prioritizing programmatic overrides over the environment.
- Ensuring the `config_scope` context manager works as expected.
"""

import pytest

from tool_calls.config import FrozenConfig, config_scope, resolve_config
from tool_calls.exceptions import ConfigurationError
from tool_calls.extraction import ToolCallExtractor


class TestConfigurationSystem:
    """A test suite for the configuration resolution logic."""

    @pytest.mark.unit
    def test_defaults(self):
        assert resolve_config() == FrozenConfig(
            allow_overlapping_matches=False, enable_diagnostics=False
        )

    @pytest.mark.unit
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TOOL_CALLS_ENABLE_DIAGNOSTICS", "1")
        monkeypatch.setenv("TOOL_CALLS_ALLOW_OVERLAPPING_MATCHES", "true")

        resolved = resolve_config()

        assert resolved.enable_diagnostics is True
        assert resolved.allow_overlapping_matches is True

    @pytest.mark.unit
    def test_programmatic_overrides_environment(self, monkeypatch):
        monkeypatch.setenv("TOOL_CALLS_ENABLE_DIAGNOSTICS", "true")

        resolved = resolve_config({"enable_diagnostics": False, "unknown": 1})

        assert resolved.enable_diagnostics is False

    @pytest.mark.unit
    def test_invalid_value_raises_configuration_error(self, monkeypatch):
        monkeypatch.setenv("TOOL_CALLS_ENABLE_DIAGNOSTICS", "maybe")

        with pytest.raises(ConfigurationError, match="validation failed"):
            resolve_config()

    @pytest.mark.unit
    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("TOOL_CALLS_ALLOW_OVERLAPPING_MATCHES=true\n")

        resolved = resolve_config(use_env_file=env_file)

        assert resolved.allow_overlapping_matches is True

    @pytest.mark.unit
    def test_environment_beats_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("TOOL_CALLS_ENABLE_DIAGNOSTICS=true\n")
        monkeypatch.setenv("TOOL_CALLS_ENABLE_DIAGNOSTICS", "false")

        assert resolve_config(use_env_file=env_file).enable_diagnostics is False

    @pytest.mark.unit
    def test_missing_env_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            resolve_config(use_env_file=tmp_path / "missing.env")


class TestConfigScope:
    @pytest.mark.unit
    def test_scope_replaces_environment(self, monkeypatch):
        monkeypatch.setenv("TOOL_CALLS_ENABLE_DIAGNOSTICS", "true")

        with config_scope(FrozenConfig(allow_overlapping_matches=True)):
            resolved = resolve_config()

        assert resolved == FrozenConfig(allow_overlapping_matches=True)
        assert resolve_config().enable_diagnostics is True

    @pytest.mark.unit
    def test_programmatic_applies_on_top_of_scope(self):
        with config_scope(FrozenConfig(allow_overlapping_matches=True)):
            resolved = resolve_config({"enable_diagnostics": True})

        assert resolved == FrozenConfig(
            allow_overlapping_matches=True, enable_diagnostics=True
        )

    @pytest.mark.unit
    def test_extractor_resolves_at_construction(self):
        with config_scope(FrozenConfig(enable_diagnostics=True)):
            extractor = ToolCallExtractor()

        assert extractor.config.enable_diagnostics is True
        assert extractor.extract("text").diagnostics is not None
