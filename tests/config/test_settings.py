"""
Tests for environment-driven settings.
"""

import logging

import pytest

from minishell.config.settings import Settings, parse_log_level
from minishell.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in (
        "MINISHELL_PROMPT",
        "MINISHELL_SEPARATOR",
        "MINISHELL_LOG_LEVEL",
        "MINISHELL_START_DIR",
    ):
        monkeypatch.delenv(key, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.prompt == "> "
        assert settings.separator == "-----------------"
        assert settings.log_level == logging.WARNING
        assert settings.start_dir is None

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("MINISHELL_PROMPT", "$ ")
        monkeypatch.setenv("MINISHELL_SEPARATOR", "===")
        monkeypatch.setenv("MINISHELL_LOG_LEVEL", "debug")
        monkeypatch.setenv("MINISHELL_START_DIR", "/tmp")

        settings = Settings()

        assert settings.prompt == "$ "
        assert settings.separator == "==="
        assert settings.log_level == logging.DEBUG
        assert settings.start_dir == "/tmp"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("MINISHELL_LOG_LEVEL", "loud")

        with pytest.raises(ConfigurationError, match="MINISHELL_LOG_LEVEL"):
            Settings()


def test_parse_log_level():
    assert parse_log_level(" Info ") == logging.INFO
