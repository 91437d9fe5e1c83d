"""
Command-line interface for wildgrep.

Recursively "almost-greps" a directory tree until a timeout: files whose
name matches a glob are checked byte for byte for a fixed needle.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wildgrep import __version__
from wildgrep.core.config import SearchConfig
from wildgrep.core.constants import (
    DEFAULT_FILE_PATTERN,
    DEFAULT_ROOT,
    DEFAULT_TIMEOUT_MS,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
)
from wildgrep.core.exceptions import WildgrepError
from wildgrep.search import Searcher


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging based on verbosity level.

    Args:
        verbose: Enable verbose (DEBUG) logging
        quiet: Enable quiet mode (WARNING+ only)
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wildgrep",
        description=(
            "Recursively almost-grep until timeout. The needle is checked byte for byte."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search every file under the current directory
  wildgrep TODO

  # Only Go sources below src/, give up after half a second
  wildgrep -p src -f '*.go' -t 500 context.TODO

  # Settings from a YAML file, flags take precedence
  wildgrep -c wildgrep.yaml -q needle

Patterns: '*' matches one or more characters (zero at the end of a pattern),
'?' matches exactly one, and '\\' makes the next character literal.
        """,
    )

    parser.add_argument("needle", help="Text to look for in file contents")
    parser.add_argument(
        "-p", "--path", default=None, help=f"Path to start from (default: {DEFAULT_ROOT})"
    )
    parser.add_argument(
        "-f",
        "--filepattern",
        default=None,
        help=f"File name pattern (default: {DEFAULT_FILE_PATTERN})",
    )
    parser.add_argument(
        "-t",
        "--timeout",
        type=int,
        default=None,
        help=f"Timeout in milliseconds (default: {DEFAULT_TIMEOUT_MS})",
    )
    parser.add_argument("-j", "--jobs", type=int, default=None, help="Number of scanning threads")
    parser.add_argument("-c", "--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output (DEBUG level)"
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_config(args: argparse.Namespace) -> SearchConfig:
    """Merge the optional YAML file with the command-line flags."""
    overrides = {
        "needle": args.needle,
        "root": args.path,
        "file_pattern": args.filepattern,
        "timeout_ms": args.timeout,
        "max_workers": args.jobs,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}

    if args.config is not None:
        return SearchConfig.from_yaml(args.config, overrides)
    return SearchConfig.from_dict(overrides)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose, quiet=args.quiet)
    logger = logging.getLogger(__name__)

    try:
        config = load_config(args)
        result = Searcher(config).search()

        for path in result.hits:
            print(path)
        print(len(result.hits), "hits")
        sys.stdout.flush()

        result.check()
        return EXIT_OK

    except WildgrepError as e:
        logger.error(f"❌ {e.message}")
        if e.details:
            logger.error(f"Details: {e.details}")
        return EXIT_FAILURE

    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
