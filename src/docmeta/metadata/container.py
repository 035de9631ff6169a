"""Multi-valued metadata container."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime

from loguru import logger

from docmeta.core.exceptions import PropertyTypeMismatch
from docmeta.metadata.dates import format_date, parse_date
from docmeta.metadata.property import Property, PropertyType, ValueType

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def _key(name: str | Property) -> str:
    return name.name if isinstance(name, Property) else name


def _require(prop: Property, value_type: ValueType) -> None:
    """Reject a typed write through a descriptor of the wrong kind.

    The structural kind is checked before the value kind.

    Raises:
        PropertyTypeMismatch: If the descriptor is not SIMPLE or does not
            declare ``value_type``.
    """
    if prop.property_type is not PropertyType.SIMPLE:
        raise PropertyTypeMismatch(PropertyType.SIMPLE, prop.property_type, prop.name)
    if prop.value_type is not value_type:
        raise PropertyTypeMismatch(value_type, prop.value_type, prop.name)


def _require_text(name: object, value: object) -> None:
    if not isinstance(name, str):
        raise TypeError(f"Metadata name must be str, not {type(name).__name__}")
    if not isinstance(value, str):
        raise TypeError(
            f"Metadata value for {name!r} must be str, not {type(value).__name__}"
        )


class Metadata:
    """A multi-valued metadata container.

    Maps each name to an ordered, non-empty list of text values. A name is
    either absent or holds at least one value; removing a name removes all
    of its values.

    Raw accessors take plain string names. Typed accessors take a
    Property descriptor and follow a permissive-read, strict-write policy:
    get_int/get_date return None on any mismatch or unparseable value,
    while typed writes raise PropertyTypeMismatch.

    Example:
        metadata = Metadata()
        metadata.add("Author", "Alice")
        metadata.add("Author", "Bob")
        metadata.get_values("Author")
        # ["Alice", "Bob"]

        metadata.set(MSOffice.PAGE_COUNT, 12)
        metadata.get("Page-Count")
        # "12"

    Instances are not safe for concurrent mutation.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self) -> None:
        self._metadata: dict[str, list[str]] = {}

    # =========================================================================
    # Raw access
    # =========================================================================

    def names(self) -> list[str]:
        """Return the names currently present."""
        return list(self._metadata)

    def get(self, name: str | Property) -> str | None:
        """Get the first value for a name.

        A Property is read by name only; its declared kinds are not checked.

        Args:
            name: Metadata name or property descriptor.

        Returns:
            First value, or None if the name is not present.
        """
        values = self._metadata.get(_key(name))
        if values is None:
            return None
        return values[0]

    def get_values(self, name: str | Property) -> list[str]:
        """Get all values for a name, in insertion order.

        Returns:
            A copy of the values, or an empty list if the name is not present.
        """
        return list(self._metadata.get(_key(name), ()))

    def is_multi_valued(self, name: str | Property) -> bool:
        """Return True if the name is present with more than one value."""
        return len(self._metadata.get(_key(name), ())) > 1

    def add(self, name: str | Property, value: str) -> None:
        """Append a value to a name, creating it if absent.

        A Property is written by name only, which is how multi-valued
        properties are populated.

        Args:
            name: Metadata name or property descriptor.
            value: Value to append after any existing values.

        Raises:
            TypeError: If the name or value is not text.
        """
        name = _key(name)
        _require_text(name, value)
        values = self._metadata.get(name)
        if values is None:
            self._metadata[name] = [value]
        else:
            values.append(value)

    def set(self, name: str | Property, value: str | int | date) -> None:
        """Set a name to a single value, replacing any existing values.

        With a string name the value must be text. With a Property, text is
        written as-is, while int and date/datetime values are checked
        against the descriptor and converted to canonical text: decimal for
        integers, the canonical UTC pattern for dates.

        Args:
            name: Metadata name or property descriptor.
            value: New value.

        Raises:
            PropertyTypeMismatch: If an int or date value is written through
                a descriptor that is not SIMPLE or declares another value type.
            TypeError: If the name or value type is not supported.
            ValueError: If a datetime cannot be expressed in UTC.
        """
        if isinstance(name, Property):
            self._set_property(name, value)
            return
        _require_text(name, value)
        self._metadata[name] = [value]

    def set_all(self, properties: Mapping[str, str]) -> None:
        """Copy every name/value pair from a flat mapping.

        Each name becomes single-valued, overwriting any existing values.
        """
        for name, value in properties.items():
            _require_text(name, value)
            self._metadata[name] = [value]
        logger.debug(f"Imported {len(properties)} metadata properties")

    def remove(self, name: str | Property) -> None:
        """Remove a name and all its values. Does nothing if absent."""
        self._metadata.pop(_key(name), None)

    def size(self) -> int:
        """Return the number of names present."""
        return len(self._metadata)

    # =========================================================================
    # Typed access
    # =========================================================================

    def get_int(self, prop: Property) -> int | None:
        """Get the value of a simple integer property.

        Args:
            prop: Property declared SIMPLE and INTEGER.

        Returns:
            The integer value, or None if the property is not set, the
            descriptor is of another kind, or the value is not an integer.
        """
        if prop.property_type is not PropertyType.SIMPLE:
            return None
        if prop.value_type is not ValueType.INTEGER:
            return None

        value = self.get(prop.name)
        if value is None or not _INTEGER_PATTERN.fullmatch(value):
            return None
        return int(value)

    def get_date(self, prop: Property) -> datetime | None:
        """Get the value of a simple date property.

        Args:
            prop: Property declared SIMPLE and DATE.

        Returns:
            Aware UTC datetime, or None if the property is not set, the
            descriptor is of another kind, or the value is not a recognized
            date.
        """
        if prop.property_type is not PropertyType.SIMPLE:
            return None
        if prop.value_type is not ValueType.DATE:
            return None
        return parse_date(self.get(prop.name))

    def _set_property(self, prop: Property, value: str | int | date) -> None:
        if isinstance(value, str):
            text = value
        elif isinstance(value, bool):
            raise TypeError(f"Unsupported value for property {prop.name!r}: bool")
        elif isinstance(value, int):
            _require(prop, ValueType.INTEGER)
            text = str(value)
        elif isinstance(value, date):
            _require(prop, ValueType.DATE)
            text = format_date(value)
        else:
            raise TypeError(
                f"Unsupported value for property {prop.name!r}: {type(value).__name__}"
            )
        self._metadata[prop.name] = [text]

    # =========================================================================
    # Python protocol
    # =========================================================================

    def __len__(self) -> int:
        return len(self._metadata)

    def __contains__(self, name: object) -> bool:
        if isinstance(name, Property):
            name = name.name
        return name in self._metadata

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Metadata):
            return NotImplemented
        return self._metadata == other._metadata

    def __str__(self) -> str:
        return "".join(
            f"{name}={value} "
            for name, values in self._metadata.items()
            for value in values
        )

    def __repr__(self) -> str:
        return f"Metadata({self._metadata!r})"
