"""
Configuration settings for the shell.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from minishell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Shell settings loaded from environment variables."""

    def __init__(self):
        self.prompt: str = self._get_env("MINISHELL_PROMPT", "> ")
        self.separator: str = self._get_env("MINISHELL_SEPARATOR", "-----------------")
        self.log_level: int = self._get_log_level("MINISHELL_LOG_LEVEL", "WARNING")
        self.start_dir: Optional[str] = os.getenv("MINISHELL_START_DIR") or None

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level by name, raise error if it is not a known level."""
        return parse_log_level(self._get_env(key, default), key)


def parse_log_level(value: str, source: str = "log level") -> int:
    """
    Convert a level name such as "info" into its logging constant.

    Raises:
        ConfigurationError: If the name is not a standard logging level
    """
    name = value.strip().upper()
    if name not in _LOG_LEVELS:
        raise ConfigurationError(
            f"Invalid {source} '{value}', expected one of {', '.join(_LOG_LEVELS)}"
        )
    return getattr(logging, name)
