"""
Configuration management.
"""

from .config import (
    Config,
    get_config,
    reset_config,
    LogConfig,
    OutputConfig,
    LOG_LEVELS,
)

__all__ = [
    "Config",
    "get_config",
    "reset_config",
    "LogConfig",
    "OutputConfig",
    "LOG_LEVELS",
]
