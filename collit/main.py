"""Main CLI entry point for collit.

Provides commands: build, options
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from collit.builders import BUILDERS
from collit.cli.build import build_command
from collit.cli.options import options_command

logger = logging.getLogger("collit.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = argparse.ArgumentParser(
        description="collit - build collections from inline literals",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    build_parser = subparsers.add_parser(
        "build",
        help="Build a container from a literal and print it",
    )
    build_parser.add_argument(
        "kind",
        choices=sorted(BUILDERS),
        help="Container to build",
    )
    build_parser.add_argument(
        "literal",
        help=(
            "Entry list, e.g. 'a => 1, b => 2' for maps or 'a, b' for sets. "
            "May start with an option list such as '[capacity=8, hasher=any]'."
        ),
    )
    build_parser.add_argument(
        "-o",
        "--option",
        action="append",
        metavar="NAME=VALUE",
        help="Option for hashmap/hashset (repeatable): capacity, hasher, key_map",
    )
    build_parser.add_argument(
        "--literal",
        dest="literal_tokens",
        action="store_true",
        help="Read keys, values and elements as Python literals instead of strings",
    )

    subparsers.add_parser(
        "options",
        help="List recognized options, hashers and key maps",
    )

    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.command == "build":
        return build_command(args)
    elif args.command == "options":
        return options_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
