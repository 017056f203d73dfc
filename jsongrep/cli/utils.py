"""
CLI utility functions for jsongrep.

Contains:
- The shared stderr console (stdout carries records only)
- Error display (print_error, print_record_error)
- Run summary display (print_stats)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..config.config import get_config

if TYPE_CHECKING:
    from .runner import RunStats


# Global Console (stderr)
console = Console(stderr=True, highlight=False, soft_wrap=True)


def print_error(message: str) -> None:
    """Print a fatal error (bad options, bad specification)."""
    style = get_config().output.error_style
    console.print(Text.assemble(("error: ", style), message))


def print_record_error(line_no: int, message: str) -> None:
    """Print a per-record failure as 'line N: <message>'."""
    style = get_config().output.error_style
    console.print(Text.assemble((f"line {line_no}: ", style), message))


def print_stats(stats: "RunStats") -> None:
    """Print the run summary table."""
    table = Table(
        show_header=True,
        header_style="bold magenta",
        title="jsongrep summary",
        title_style="bold cyan",
        border_style="blue",
    )
    table.add_column("Metric", style="bold yellow")
    table.add_column("Count", justify="right", style="cyan")

    for name, value in stats.to_dict().items():
        table.add_row(name, str(value))

    console.print(table)
