"""Show command for docmeta CLI."""

import argparse

from ...core.config import Config
from ...metadata.container import Metadata
from ...metadata.dates import format_date
from ...metadata.keys import lookup
from ...metadata.property import ValueType
from ...sources.properties import read_properties

INVALID = "<invalid>"


def add_show_arguments(parser: argparse.ArgumentParser) -> None:
    """Add arguments for the show command."""
    parser.add_argument("path", help="Property file (key=value lines)")
    parser.add_argument(
        "--typed",
        action="store_true",
        help="Read well-known integer and date keys through typed accessors",
    )


def handle_show(args, config: Config) -> int:
    """Handle show command.

    Args:
        args: Parsed command arguments.
        config: Application configuration.

    Returns:
        Exit status.
    """
    metadata = Metadata()
    metadata.set_all(read_properties(args.path, encoding=config.input.encoding))
    _print_metadata(metadata, typed=args.typed)
    return 0


def _print_metadata(metadata: Metadata, typed: bool) -> None:
    """Print one line per value, names sorted."""
    for name in sorted(metadata.names()):
        if typed:
            print(f"{name} = {_typed_value(metadata, name)}")
            continue
        for value in metadata.get_values(name):
            print(f"{name} = {value}")


def _typed_value(metadata: Metadata, name: str) -> str:
    prop = lookup(name)
    if prop is None or not prop.is_simple:
        return ", ".join(metadata.get_values(name))

    if prop.value_type is ValueType.INTEGER:
        number = metadata.get_int(prop)
        return INVALID if number is None else str(number)
    if prop.value_type is ValueType.DATE:
        moment = metadata.get_date(prop)
        return INVALID if moment is None else format_date(moment)
    return metadata.get(prop) or ""
