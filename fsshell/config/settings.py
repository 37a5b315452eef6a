"""
Configuration settings for the application.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from fsshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.log_level: str = self._get_log_level("FSSHELL_LOG_LEVEL", "WARNING")
        self.log_file: Optional[str] = os.getenv("FSSHELL_LOG_FILE") or None
        self.show_banner: bool = self._get_bool_env("FSSHELL_BANNER", True)
        # Any value disables color, as in the NO_COLOR convention
        self.color: bool = not os.getenv("NO_COLOR")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool_env(self, key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        return value.strip().lower() not in ("0", "false", "no", "off")

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if it is not a known level."""
        value = self._get_env(key, default).strip().upper()
        if value not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid value for {key}: {value!r} (expected one of {', '.join(_LOG_LEVELS)})"
            )
        return value
