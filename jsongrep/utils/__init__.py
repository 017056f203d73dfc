"""
Utility modules.
"""

from .logger import get_logger, setup_logger, GrepLogger

__all__ = [
    "get_logger",
    "setup_logger",
    "GrepLogger",
]
