"""
Configuration management for jsongrep.
Loads settings from environment variables with sensible defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LogConfig:
    """
    Logging configuration.

    An empty log_dir disables file logging; console logs go to stderr.
    """
    level: str = "WARNING"
    log_dir: str = ""


@dataclass
class OutputConfig:
    """Terminal output configuration."""
    stats: bool = False  # Print the run summary table by default
    error_style: str = "bold red"  # rich style for per-record error prefixes


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables (after .env files)
    and provides typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        env_path = Path(env_file)
        if env_path.exists():
            load_dotenv(env_path, override=True)

        # Initialize sub-configs
        self.log = self._load_log_config()
        self.output = self._load_output_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("JSONGREP_LOG_LEVEL", "WARNING").upper(),
            log_dir=os.getenv("JSONGREP_LOG_DIR", ""),
        )

    def _load_output_config(self) -> OutputConfig:
        """Load output configuration from environment."""
        return OutputConfig(
            stats=os.getenv("JSONGREP_STATS", "false").lower() == "true",
            error_style=os.getenv("JSONGREP_ERROR_STYLE", "bold red"),
        )

    def reload(self, env_file: str = ".env") -> "Config":
        """Reload configuration from environment."""
        self._initialized = False
        Config._instance = None
        return Config(env_file)

    def validate(self) -> tuple[bool, List[str]]:
        """
        Validate configuration values.

        Returns:
            (is_valid, list of error messages)
        """
        errors = []
        if self.log.level not in LOG_LEVELS:
            errors.append(
                f"JSONGREP_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log.level!r}"
            )
        return len(errors) == 0, errors

    def summary_short(self) -> str:
        """Generate a short one-line configuration summary."""
        log_dir = self.log.log_dir or "(console only)"
        return f"log={self.log.level} | log_dir={log_dir} | stats={self.output.stats}"


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)


def reset_config() -> None:
    """Drop the global config instance (for testing)."""
    Config._instance = None
