"""Date command for docmeta CLI."""

import argparse

from ...core.config import Config
from ...metadata.dates import format_date, parse_date


def add_date_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments for the date command."""
    parser.add_argument("texts", nargs="+", metavar="TEXT", help="Date text to normalize")


def handle_date(args, config: Config) -> int:
    """Handle date command.

    Prints one canonical date per input text.

    Args:
        args: Parsed command arguments.
        config: Application configuration.

    Returns:
        Exit status: 1 if any text is not a recognized date, else 0.
    """
    status = 0
    for text in args.texts:
        parsed = parse_date(text)
        if parsed is None:
            print(f"{text}: not a recognized date")
            status = 1
        else:
            print(format_date(parsed))
    return status
