"""
Argument parser setup for the jsongrep CLI.

Options:
- query source: -r/--raw_query TEXT or -q/--query_file PATH
- sort source: -k/--raw_sort TEXT or -s/--sort PATH
- --stats: summary table on stderr
- verbosity: --quiet / -v/--verbose / --debug
"""

import argparse

from .. import __version__


def setup_argparse(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments for jsongrep.

    The two query sources (and the two sort sources) are accepted together
    here and rejected by the runner, so the conflict is reported as an
    invalid option rather than a usage error.
    """
    parser = argparse.ArgumentParser(
        prog="jsongrep",
        description="Filter and sort JSON lines read from stdin",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Select records whose /s matches [sS]irius
  jsongrep -r '{"query":{"type":"raw","pair":{"p":"/s","cond":{"type":"match","value":{"type":"string","value":"[sS]irius"},"mtype":"regex"}}}}' < stars.jsonl

  # Sort all records by /i descending
  jsongrep -k '{"sort":[{"p":"/i","ord":"desc"}]}' < stars.jsonl

  # Query and sort from files (JSON, or YAML for .yml/.yaml)
  jsongrep -q query.yml -s sort.json --stats < stars.jsonl
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Query sources
    parser.add_argument(
        "-r", "--raw_query",
        default=None,
        metavar="TEXT",
        help="Inline query document (JSON)"
    )
    parser.add_argument(
        "-q", "--query_file",
        default=None,
        metavar="PATH",
        help="Query document file (JSON, or YAML for .yml/.yaml)"
    )

    # Sort sources
    parser.add_argument(
        "-k", "--raw_sort",
        default=None,
        metavar="TEXT",
        help="Inline sort document (JSON)"
    )
    parser.add_argument(
        "-s", "--sort",
        default=None,
        metavar="PATH",
        help="Sort document file (JSON, or YAML for .yml/.yaml)"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        default=None,
        help="Print a summary table (read/selected/filtered/failed) to stderr"
    )

    # Verbosity: mutually exclusive group (--quiet / -v / --debug)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "--quiet",
        action="store_true",
        default=False,
        help="Quiet mode: WARNING logs only"
    )
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Verbose mode: INFO logs (run summary)"
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Debug mode: DEBUG logs (pattern compilation, sort passes)"
    )

    return parser.parse_args(argv)


def resolve_log_level(args: argparse.Namespace, default: str) -> str:
    """Map verbosity flags to a log level; no flag keeps the configured default."""
    if args.debug:
        return "DEBUG"
    if args.verbose:
        return "INFO"
    if args.quiet:
        return "WARNING"
    return default
