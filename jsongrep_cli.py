#!/usr/bin/env python3
"""
jsongrep - JSON lines filter/sort CLI

This is a PURE SHELL - it only:
- Parses options
- Loads the query/sort specification
- Runs the input loop and prints results

NO evaluation logic lives here. All operations go through jsongrep/*.

Usage:
  jsongrep -r '<query json>' < records.jsonl
  jsongrep -q query.yml -k '{"sort":[{"p":"/i"}]}' < records.jsonl
"""

import io
import sys

from jsongrep.cli.argparser import setup_argparse, resolve_log_level
from jsongrep.cli.runner import (
    InvalidOptionError,
    build_cli_sorter,
    build_selector,
    run_stream,
    validate_options,
)
from jsongrep.cli.utils import print_error, print_stats
from jsongrep.config.config import get_config
from jsongrep.rules.dsl_nodes import get_referenced_pointers
from jsongrep.rules.dsl_parser import SpecError
from jsongrep.utils.logger import setup_logger, get_logger


EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_USAGE_ERROR = 2


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point.

    Returns:
        Process exit status
    """
    # Parse CLI arguments FIRST (before any config or logging)
    args = setup_argparse(argv)

    config = get_config()
    valid, errors = config.validate()
    if not valid:
        for message in errors:
            print_error(message)
        return EXIT_USAGE_ERROR

    setup_logger(config.log.log_dir, resolve_log_level(args, config.log.level))
    logger = get_logger()
    logger.debug(f"Configuration: {config.summary_short()}")

    # Specification errors abort before any input is read
    try:
        validate_options(args)
        selector = build_selector(args)
        sorter = build_cli_sorter(args)
    except (InvalidOptionError, SpecError) as e:
        print_error(str(e))
        return EXIT_USAGE_ERROR
    except OSError as e:
        print_error(str(e))
        return EXIT_IO_ERROR

    if selector.query is not None:
        logger.debug(
            f"Query: {selector.query!r} (reads {get_referenced_pointers(selector.query)})"
        )
    if sorter is not None:
        logger.debug(f"Sort criteria: {list(sorter.criteria)!r}")

    # Undecodable bytes reach the selector as lone surrogates
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="surrogateescape")

    stats = run_stream(sys.stdin, selector, sorter, out=sys.stdout)

    show_stats = args.stats if args.stats is not None else config.output.stats
    if show_stats:
        print_stats(stats)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
