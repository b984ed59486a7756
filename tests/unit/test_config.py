"""Tests for runtime config — env-driven settings."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from arbor.config import ArborSettings, configure_logging


class TestArborSettings:
    def test_defaults(self):
        config = ArborSettings()
        assert config.isolate_failures is True
        assert config.max_log_length == 4000
        assert config.max_tag_length is None
        assert config.logger_prefix == "forest"
        assert config.console_min_level == "VERBOSE"
        assert config.log_level == "WARNING"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("ARBOR_ISOLATE_FAILURES", "false")
        monkeypatch.setenv("ARBOR_MAX_LOG_LENGTH", "120")
        monkeypatch.setenv("ARBOR_CONSOLE_MIN_LEVEL", "info")
        config = ArborSettings()
        assert config.isolate_failures is False
        assert config.max_log_length == 120
        assert config.console_min_level == "INFO"

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValidationError):
            ArborSettings(max_log_length=0)

    def test_rejects_unknown_console_level(self):
        with pytest.raises(ValidationError):
            ArborSettings(console_min_level="shouting")

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            ArborSettings(log_level="CHATTY")


class TestConfigureLogging:
    def test_sets_package_logger_level(self):
        pkg_logger = logging.getLogger("arbor")
        previous = pkg_logger.level
        try:
            result = configure_logging(ArborSettings(log_level="debug"))
            assert result is pkg_logger
            assert pkg_logger.level == logging.DEBUG
        finally:
            pkg_logger.setLevel(previous)
