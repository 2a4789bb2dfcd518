"""
fpbelt CLI: run the sequence utilities on text from the command line.

Commands:
    fpbelt join <item>...: Join items with a delimiter
    fpbelt same <left> <right>: Compare two lists ignoring order
    fpbelt insert <target> <batch> --at: Splice a batch into a list
    fpbelt parse-date <value>: Read a date, print it as ISO 8601
    fpbelt parse-url <url>: Read an absolute URL

Lists are passed as single arguments split on --sep (default ",").
Failures print a reason and exit with status 1.
"""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional

from loguru import logger

from ..array import get_disordered_eq, insert_many, join
from ..date import YEAR_ONLY_PATTERN, parse_date, to_iso_string
from ..log import configure_logging
from ..option import Some
from ..url import get_param, parse_o
from ..witness import ord_natural


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

DEFAULT_SEPARATOR = ","
DEFAULT_DELIMITER = ","

# ASCII digits only, so every match is accepted by int()
INTEGER_PATTERN = re.compile(r"-?\d+", re.ASCII)


# =============================================================================
# INPUT HANDLING
# =============================================================================

def split_items(text: str, sep: str = DEFAULT_SEPARATOR) -> tuple[str, ...]:
    """Split a list argument. An empty argument is an empty list."""
    if not text:
        return ()
    return tuple(text.split(sep))


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_join(args: argparse.Namespace) -> int:
    """Print the items joined by the delimiter."""
    print(join(args.delimiter)(args.items))
    return 0


def cmd_same(args: argparse.Namespace) -> int:
    """Exit 0 if both lists hold the same items with the same counts."""
    left = split_items(args.left, args.sep)
    right = split_items(args.right, args.sep)

    if get_disordered_eq(ord_natural).equals(left, right):
        print("equal")
        return 0
    print("not equal")
    return 1


def cmd_insert(args: argparse.Namespace) -> int:
    """Print the target list with the batch spliced in."""
    target = split_items(args.target, args.sep)
    batch = split_items(args.batch, args.sep)

    if not batch:
        print("ERROR: Batch must contain at least one item")
        return 1

    result = insert_many(args.at)(batch)(target)
    if isinstance(result, Some):
        print(join(args.sep)(result.value))
        return 0

    print(f"ERROR: Index {args.at} is out of range for {len(target)} items")
    return 1


def cmd_parse_date(args: argparse.Namespace) -> int:
    """Print the date as an ISO 8601 UTC string."""
    value: object = args.value
    # Bare integers are epoch milliseconds, except four-digit years
    if INTEGER_PATTERN.fullmatch(args.value) and not YEAR_ONLY_PATTERN.match(args.value):
        value = int(args.value)

    result = parse_date(value)
    if isinstance(result, Some):
        print(to_iso_string(result.value))
        return 0

    print(f"ERROR: Cannot read a date from '{args.value}'")
    return 1


def cmd_parse_url(args: argparse.Namespace) -> int:
    """Print the normalized URL and, optionally, one query parameter."""
    result = parse_o(args.url)
    if not isinstance(result, Some):
        print(f"ERROR: '{args.url}' is not an absolute URL")
        return 1

    url = result.value
    print(str(url))

    if args.param is not None:
        param = get_param(args.param)(url.params)
        if not isinstance(param, Some):
            print(f"ERROR: Parameter '{args.param}' not found")
            return 1
        print(f"{args.param}={param.value}")

    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="fpbelt",
        description="fpbelt: sequence utilities from the command line",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Join command
    join_parser = subparsers.add_parser(
        "join",
        help="Join items with a delimiter",
    )
    join_parser.add_argument("items", nargs="*", help="Items to join")
    join_parser.add_argument(
        "-d", "--delimiter",
        default=DEFAULT_DELIMITER,
        help=f"Delimiter (default: '{DEFAULT_DELIMITER}')",
    )
    join_parser.set_defaults(func=cmd_join)

    # Same command
    same_parser = subparsers.add_parser(
        "same",
        help="Compare two lists ignoring order",
    )
    same_parser.add_argument("left", help="First list")
    same_parser.add_argument("right", help="Second list")
    same_parser.add_argument("--sep", default=DEFAULT_SEPARATOR, help="List separator")
    same_parser.set_defaults(func=cmd_same)

    # Insert command
    insert_parser = subparsers.add_parser(
        "insert",
        help="Splice a batch into a list",
    )
    insert_parser.add_argument("target", help="List to insert into")
    insert_parser.add_argument("batch", help="Items to insert")
    insert_parser.add_argument("--at", type=int, required=True, help="Insertion index")
    insert_parser.add_argument("--sep", default=DEFAULT_SEPARATOR, help="List separator")
    insert_parser.set_defaults(func=cmd_insert)

    # Parse-date command
    date_parser = subparsers.add_parser(
        "parse-date",
        help="Read a date and print it as ISO 8601",
    )
    date_parser.add_argument("value", help="ISO 8601 text, a year, or epoch milliseconds")
    date_parser.set_defaults(func=cmd_parse_date)

    # Parse-url command
    url_parser = subparsers.add_parser(
        "parse-url",
        help="Read an absolute URL",
    )
    url_parser.add_argument("url", help="URL to parse")
    url_parser.add_argument("--param", default=None, help="Query parameter to print")
    url_parser.set_defaults(func=cmd_parse_url)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging("DEBUG")

    if args.command is None:
        parser.print_help()
        return 0

    with logger.contextualize(command=args.command):
        logger.debug("Running command")
        return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
