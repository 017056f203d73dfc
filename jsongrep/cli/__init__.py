"""
CLI package for jsongrep.

- argparser.py: Command-line options
- runner.py: Option validation and the input loop
- utils.py: stderr console, error and summary display
"""

from .argparser import setup_argparse, resolve_log_level
from .runner import (
    InvalidOptionError,
    RunStats,
    validate_options,
    build_selector,
    build_cli_sorter,
    run_stream,
)
from .utils import console, print_error, print_record_error, print_stats

__all__ = [
    "setup_argparse",
    "resolve_log_level",
    "InvalidOptionError",
    "RunStats",
    "validate_options",
    "build_selector",
    "build_cli_sorter",
    "run_stream",
    "console",
    "print_error",
    "print_record_error",
    "print_stats",
]
