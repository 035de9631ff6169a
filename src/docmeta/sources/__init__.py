"""External sources that populate metadata containers."""

from docmeta.sources.properties import parse_properties, read_properties

__all__ = [
    "parse_properties",
    "read_properties",
]
