"""
Logging system for jsongrep.
Provides human-readable logs on stderr with optional file output.

stdout carries the selected records, so console logging never writes there.
"""

import copy
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


LOGGER_NAME = "jsongrep"


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        # Other handlers share the record; color a copy
        record = copy.copy(record)
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class GrepLogger:
    """
    Central logging system for jsongrep.

    Features:
    - Console output with colors on stderr
    - Optional dated log file when a log directory is configured
    """

    _instance: Optional['GrepLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "", log_level: str = "WARNING"):
        if GrepLogger._initialized:
            return

        self.log_dir = Path(log_dir) if log_dir else None
        if self.log_dir is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._create_logger(LOGGER_NAME, log_level)

        GrepLogger._initialized = True

    def _create_logger(self, name: str, level: str) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = False
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        # Console handler with colors
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        # File handler (plain text, no colors)
        if self.log_dir is not None:
            log_file = self.log_dir / f"jsongrep_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger

    @property
    def level(self) -> int:
        return self.main_logger.level

    def info(self, msg: str, *args, **kwargs):
        """Log info message."""
        self.main_logger.info(msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        """Log debug message."""
        self.main_logger.debug(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        """Log warning message."""
        self.main_logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        """Log error message."""
        self.main_logger.error(msg, *args, **kwargs)

    def critical(self, msg: str, *args, **kwargs):
        """Log critical message."""
        self.main_logger.critical(msg, *args, **kwargs)


# Global logger instance
_logger: Optional[GrepLogger] = None


def get_logger(log_dir: str = "", log_level: str = "WARNING") -> GrepLogger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = GrepLogger(log_dir, log_level)
    return _logger


def setup_logger(log_dir: str = "", log_level: str = "WARNING") -> GrepLogger:
    """
    Initialize the logger with custom settings.

    Module-level references obtained from get_logger() keep working: they
    wrap the same underlying "jsongrep" logger, whose handlers are replaced.
    """
    global _logger
    GrepLogger._initialized = False
    GrepLogger._instance = None
    _logger = GrepLogger(log_dir, log_level)
    return _logger
