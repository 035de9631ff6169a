"""CLI entry point for docmeta."""

import argparse
import sys
from typing import NoReturn

from ..core.config import Config
from ..core.logging import configure_logging
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="docmeta",
        description="Inspect typed document metadata",
    )
    parser.add_argument("-v", "--version", action="version", version="%(prog)s 1.0.0")
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="TOML configuration file (default: $DOCMETA_CONFIG)",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    date_parser = subparsers.add_parser(
        "date", help="Normalize date text to the canonical UTC form"
    )
    commands.add_date_arguments(date_parser)

    show_parser = subparsers.add_parser(
        "show", help="Load a property file and print its metadata"
    )
    commands.add_show_arguments(show_parser)

    return parser


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = Config.from_env_or_file(args.config)
        configure_logging(config.logging)

        if args.command == "date":
            status = commands.handle_date(args, config)
        elif args.command == "show":
            status = commands.handle_show(args, config)
        else:
            parser.print_help()
            status = 0

        sys.exit(status)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
