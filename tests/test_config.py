# SPDX-License-Identifier: MIT
"""Tests for parser configuration."""

import pytest

from semver_value import DEFAULT_CONFIG, ConfigError, ParserConfig


class TestParserConfig:
    """Tests for ParserConfig defaults and validation."""

    def test_defaults(self):
        config = ParserConfig()
        assert config.max_component == 2**31 - 1
        assert config.strip_whitespace is False
        assert config == DEFAULT_CONFIG

    def test_negative_max_component(self):
        with pytest.raises(ConfigError):
            ParserConfig(max_component=-1)

    def test_non_int_max_component(self):
        with pytest.raises(ConfigError):
            ParserConfig(max_component="10")  # type: ignore

    def test_max_component_above_version_limit(self):
        with pytest.raises(ConfigError, match="cannot exceed"):
            ParserConfig(max_component=2**31)


class TestFromEnv:
    """Tests for ParserConfig.from_env."""

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("SEMVER_VALUE_MAX_COMPONENT", raising=False)
        monkeypatch.delenv("SEMVER_VALUE_STRIP_WHITESPACE", raising=False)
        assert ParserConfig.from_env() == ParserConfig()

    def test_values(self, monkeypatch):
        monkeypatch.setenv("SEMVER_VALUE_MAX_COMPONENT", "65535")
        monkeypatch.setenv("SEMVER_VALUE_STRIP_WHITESPACE", "True")
        config = ParserConfig.from_env()
        assert config.max_component == 65535
        assert config.strip_whitespace is True

    def test_false_value(self, monkeypatch):
        monkeypatch.delenv("SEMVER_VALUE_MAX_COMPONENT", raising=False)
        monkeypatch.setenv("SEMVER_VALUE_STRIP_WHITESPACE", "no")
        assert ParserConfig.from_env().strip_whitespace is False

    def test_invalid_max_component(self, monkeypatch):
        monkeypatch.setenv("SEMVER_VALUE_MAX_COMPONENT", "lots")
        with pytest.raises(ConfigError, match="SEMVER_VALUE_MAX_COMPONENT"):
            ParserConfig.from_env()

    def test_invalid_strip_whitespace(self, monkeypatch):
        monkeypatch.delenv("SEMVER_VALUE_MAX_COMPONENT", raising=False)
        monkeypatch.setenv("SEMVER_VALUE_STRIP_WHITESPACE", "maybe")
        with pytest.raises(ConfigError, match="SEMVER_VALUE_STRIP_WHITESPACE"):
            ParserConfig.from_env()
