"""Tests for the settings configuration module."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from tanakhrange.config import (
    TanakhRangeSettings,
    clear_settings_cache,
    get_settings,
    get_settings_for_cli,
    set_settings,
)
from tanakhrange.config.settings import DEFAULT_CORPUS_URL
from tanakhrange.exceptions import ConfigurationError


class TestDefaults:
    """Test default settings values."""

    def test_default_values(self):
        """Test defaults when nothing is configured."""
        settings = TanakhRangeSettings()
        assert settings.corpus_path is None
        assert settings.corpus_url == DEFAULT_CORPUS_URL
        assert settings.fetch_timeout == 30.0
        assert settings.chapter_prefix == "פרק"
        assert settings.separator_width == 20
        assert settings.log_level == "WARNING"
        assert settings.log_format == "console"
        assert settings.debug is False


class TestValidation:
    """Test field validation and normalization."""

    def test_log_level_case_insensitive(self):
        """Test log level is upper-cased."""
        assert TanakhRangeSettings(log_level="debug").log_level == "DEBUG"

    def test_log_format_case_insensitive(self):
        """Test log format is lower-cased."""
        assert TanakhRangeSettings(log_format="JSON").log_format == "json"

    def test_invalid_log_level(self):
        """Test unknown levels are rejected."""
        with pytest.raises(ValidationError):
            TanakhRangeSettings(log_level="LOUD")

    def test_invalid_timeout(self):
        """Test the fetch timeout must be positive."""
        with pytest.raises(ValidationError):
            TanakhRangeSettings(fetch_timeout=0)

    def test_negative_separator_width(self):
        """Test the separator width cannot be negative."""
        with pytest.raises(ValidationError):
            TanakhRangeSettings(separator_width=-1)

    def test_corpus_path_expands_user(self, tmp_path, monkeypatch):
        """Test ~ in paths is expanded and resolved."""
        monkeypatch.setenv("HOME", str(tmp_path))
        settings = TanakhRangeSettings(corpus_path="~/tanakh.json")
        assert settings.corpus_path == (tmp_path / "tanakh.json").resolve()

    def test_empty_corpus_path_is_none(self):
        """Test an empty string leaves the path unset."""
        assert TanakhRangeSettings(corpus_path="").corpus_path is None


class TestEnvironment:
    """Test environment variable overrides."""

    def test_env_prefix(self, monkeypatch, tmp_path):
        """Test TANAKH_ variables are read."""
        monkeypatch.setenv("TANAKH_CORPUS_PATH", str(tmp_path / "c.json"))
        monkeypatch.setenv("TANAKH_SEPARATOR_WIDTH", "10")
        settings = TanakhRangeSettings()
        assert settings.corpus_path == (tmp_path / "c.json").resolve()
        assert settings.separator_width == 10


class TestFromFile:
    """Test loading settings from configuration files."""

    def test_yaml(self, tmp_path):
        """Test YAML config files."""
        path = tmp_path / "config.yaml"
        path.write_text("separator_width: 7\nchapter_prefix: Chapter\n")
        settings = TanakhRangeSettings.from_file(path)
        assert settings.separator_width == 7
        assert settings.chapter_prefix == "Chapter"

    def test_toml(self, tmp_path):
        """Test TOML config files."""
        path = tmp_path / "config.toml"
        path.write_text('log_level = "info"\n')
        assert TanakhRangeSettings.from_file(path).log_level == "INFO"

    def test_json(self, tmp_path):
        """Test JSON config files."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"fetch_timeout": 5}))
        assert TanakhRangeSettings.from_file(path).fetch_timeout == 5.0

    def test_unsupported_suffix(self, tmp_path):
        """Test unknown file formats raise ConfigurationError."""
        path = tmp_path / "config.ini"
        path.write_text("[x]\n")
        with pytest.raises(ConfigurationError) as exc_info:
            TanakhRangeSettings.from_file(path)
        assert exc_info.value.details["detected_format"] == ".ini"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            TanakhRangeSettings.from_file(tmp_path / "nope.yaml")

    def test_misspelt_key(self, tmp_path):
        """Test a common misspelling is reported."""
        path = tmp_path / "config.yaml"
        path.write_text("timeout: 3\n")
        with pytest.raises(ConfigurationError, match="fetch_timeout"):
            TanakhRangeSettings.from_file(path)


class TestMultipleSources:
    """Test precedence between config files, env and CLI args."""

    def test_later_files_override_earlier(self, tmp_path):
        """Test the last config file wins."""
        first = tmp_path / "a.yaml"
        first.write_text("separator_width: 1\nchapter_prefix: A\n")
        second = tmp_path / "b.yaml"
        second.write_text("separator_width: 2\n")
        settings = TanakhRangeSettings.from_multiple_sources([first, second])
        assert settings.separator_width == 2
        assert settings.chapter_prefix == "A"

    def test_file_overrides_env(self, tmp_path, monkeypatch):
        """Test config file values beat environment variables."""
        monkeypatch.setenv("TANAKH_SEPARATOR_WIDTH", "9")
        path = tmp_path / "a.yaml"
        path.write_text("separator_width: 3\n")
        settings = TanakhRangeSettings.from_multiple_sources([path])
        assert settings.separator_width == 3

    def test_cli_args_override_files(self, tmp_path):
        """Test CLI args beat config files and None args are ignored."""
        path = tmp_path / "a.yaml"
        path.write_text("separator_width: 3\nchapter_prefix: A\n")
        settings = TanakhRangeSettings.from_multiple_sources(
            [path], cli_args={"separator_width": 4, "chapter_prefix": None}
        )
        assert settings.separator_width == 4
        assert settings.chapter_prefix == "A"

    def test_missing_file_skipped(self, tmp_path):
        """Test missing config files fall back to defaults."""
        settings = TanakhRangeSettings.from_multiple_sources([tmp_path / "x.yaml"])
        assert settings.separator_width == 20


class TestGlobalSettings:
    """Test the cached global settings instance."""

    def test_get_settings_is_cached(self):
        """Test repeated calls return the same instance."""
        assert get_settings() is get_settings()

    def test_set_and_clear(self):
        """Test set_settings replaces and clear_settings_cache drops it."""
        custom = TanakhRangeSettings(separator_width=3)
        set_settings(custom)
        assert get_settings() is custom
        clear_settings_cache()
        assert get_settings() is not custom

    def test_project_config_file_is_found(self, tmp_path):
        """Test tanakh-range.yaml in the working directory is loaded."""
        (Path.cwd() / "tanakh-range.yaml").write_text("separator_width: 11\n")
        clear_settings_cache()
        assert get_settings().separator_width == 11

    def test_settings_for_cli_overrides(self):
        """Test CLI overrides apply on top of the global settings."""
        settings = get_settings_for_cli(cli_overrides={"separator_width": 6})
        assert settings.separator_width == 6
        assert get_settings().separator_width == 20

    def test_settings_for_cli_missing_config(self, tmp_path):
        """Test an explicit missing config file is an error."""
        with pytest.raises(FileNotFoundError):
            get_settings_for_cli(config_file=tmp_path / "missing.yaml")
