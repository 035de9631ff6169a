"""Custom exceptions for docmeta."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docmeta.metadata.property import PropertyType, ValueType


class DocMetaError(Exception):
    """Base exception for all docmeta errors."""

    pass


class PropertyTypeMismatch(DocMetaError):
    """Typed write attempted through a descriptor of the wrong kind.

    Raised only on writes. Reads through a mismatched descriptor return
    None instead.
    """

    def __init__(
        self,
        expected: PropertyType | ValueType,
        actual: PropertyType | ValueType,
        name: str | None = None,
    ):
        """Initialize exception with the expected and actual kinds.

        Args:
            expected: Kind the write operation requires.
            actual: Kind declared by the property descriptor.
            name: Name of the property being written, if known.
        """
        self.expected = expected
        self.actual = actual
        self.name = name
        message = f"Expected a property of type {expected.name}, but received {actual.name}"
        if name:
            message = f"{message} (property {name!r})"
        super().__init__(message)


class PropertiesFileError(DocMetaError):
    """Property file could not be read."""

    pass


class ConfigError(DocMetaError):
    """Configuration file missing or invalid."""

    pass
