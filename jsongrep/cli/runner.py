"""
Input loop for the jsongrep CLI.

Reads records line by line, selects them with the query, and either prints
them immediately or buffers them for the sorter. Per-record failures are
reported and processing continues.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Callable, Iterable, TextIO

from ..rules.dsl_parser import (
    load_query_file,
    load_query_text,
    load_sort_file,
    load_sort_text,
)
from ..select import Selector
from ..sort.sorter import Sorter
from ..utils.logger import get_logger
from .utils import print_record_error


logger = get_logger()


class InvalidOptionError(ValueError):
    """Mutually exclusive specification sources were both given."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"InvalidOption ({detail})")


@dataclass
class RunStats:
    """Counters for one run."""
    read: int = 0
    selected: int = 0
    filtered: int = 0
    failed: int = 0

    def to_dict(self) -> dict:
        return {
            "read": self.read,
            "selected": self.selected,
            "filtered": self.filtered,
            "failed": self.failed,
        }


def validate_options(args: argparse.Namespace) -> None:
    """
    Reject mutually exclusive specification sources.

    Raises:
        InvalidOptionError: If both query sources or both sort sources are set
    """
    if args.raw_query is not None and args.query_file is not None:
        raise InvalidOptionError("query and raw_query are exclusive")
    if args.raw_sort is not None and args.sort is not None:
        raise InvalidOptionError("sort and raw_sort are exclusive")


def build_selector(args: argparse.Namespace) -> Selector:
    """
    Build the record selector from the query options.

    Raises:
        SpecError: If the query document is malformed
        OSError: If the query file cannot be read
    """
    if args.raw_query is not None:
        return Selector(load_query_text(args.raw_query))
    if args.query_file is not None:
        return Selector(load_query_file(args.query_file))
    return Selector.all()


def build_cli_sorter(args: argparse.Namespace) -> Sorter | None:
    """
    Build the sorter from the sort options, or None when not sorting.

    Raises:
        SpecError: If the sort document is malformed
        OSError: If the sort file cannot be read
    """
    if args.raw_sort is not None:
        return Sorter(load_sort_text(args.raw_sort))
    if args.sort is not None:
        return Sorter(load_sort_file(args.sort))
    return None


def run_stream(
    lines: Iterable[str],
    selector: Selector,
    sorter: Sorter | None = None,
    out: TextIO | None = None,
    report: Callable[[int, str], None] = print_record_error,
) -> RunStats:
    """
    Select (and optionally sort) records.

    Args:
        lines: Input lines; trailing newlines are stripped
        selector: Record selector
        sorter: When given, selected lines are buffered and written in
                sorted order after the input is exhausted
        out: Output stream for selected records (default stdout)
        report: Callback for per-record failures (1-based line number, message)

    Returns:
        RunStats for the run
    """
    out = out if out is not None else sys.stdout
    stats = RunStats()
    buffered: list[str] = []

    for line_no, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        stats.read += 1
        outcome = selector.select(line)

        if outcome.selected:
            stats.selected += 1
            if sorter is None:
                out.write(line + "\n")
            else:
                buffered.append(line)
                sorter.add(outcome.document)
        elif outcome.is_filtered:
            stats.filtered += 1
        else:
            stats.failed += 1
            logger.debug(f"Record {line_no} failed: {outcome.result.to_dict()}")
            report(line_no, str(outcome.result))

    if sorter is not None:
        for index in sorter.sorted_indexes():
            out.write(buffered[index] + "\n")

    logger.info(
        f"Processed {stats.read} records: {stats.selected} selected, "
        f"{stats.filtered} filtered, {stats.failed} failed"
    )
    return stats
