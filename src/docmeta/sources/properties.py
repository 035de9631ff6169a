"""Flat property file reader.

Reads ``key=value`` files, the flat single-valued form producers hand over
for bulk import into a Metadata container::

    # Office summary
    title = Quarterly report
    Page-Count: 12
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from docmeta.core.exceptions import PropertiesFileError

_COMMENT_PREFIXES = ("#", "!")


def parse_properties(text: str) -> dict[str, str]:
    """Parse property file text into a flat mapping.

    Blank lines and lines starting with ``#`` or ``!`` are skipped. The
    first ``=`` separates key from value, or the first ``:`` on lines with
    no ``=``; both sides are stripped. A line without a separator is a key
    with an empty value. Later keys override earlier ones.

    Args:
        text: Property file content.

    Returns:
        Mapping of key to value, in file order.
    """
    properties: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            continue

        # Names such as "tiff:ImageWidth" contain a colon, so "=" wins
        separator = "=" if "=" in stripped else ":"
        key, _, value = stripped.partition(separator)
        properties[key.strip()] = value.strip()

    return properties


def read_properties(path: Path | str, encoding: str = "utf-8") -> dict[str, str]:
    """Read a property file.

    Args:
        path: File to read.
        encoding: Text encoding of the file.

    Returns:
        Mapping of key to value.

    Raises:
        PropertiesFileError: If the file cannot be read or decoded.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise PropertiesFileError(f"Cannot read properties from {path}: {e}") from e

    properties = parse_properties(text)
    logger.debug(f"Read {len(properties)} properties from {path}")
    return properties
