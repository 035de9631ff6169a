"""Property descriptors for typed metadata access.

A descriptor names a metadata key and declares its structural kind
(single or multi-valued) and value kind (text, integer or date).
Descriptors are immutable and can be shared freely between extractors,
consumers and threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PropertyType(Enum):
    """Structural kind of a property."""

    SIMPLE = "simple"
    MULTI_VALUED = "multi_valued"


class ValueType(Enum):
    """Kind of value a property holds."""

    TEXT = "text"
    INTEGER = "integer"
    DATE = "date"


@dataclass(frozen=True)
class Property:
    """Declaration of a well-known metadata key.

    Attributes:
        name: Metadata key the property reads and writes.
        property_type: SIMPLE or MULTI_VALUED.
        value_type: TEXT, INTEGER or DATE.

    Example:
        PAGE_COUNT = Property.integer("Page-Count")
        metadata.set(PAGE_COUNT, 12)
        metadata.get_int(PAGE_COUNT)
        # 12
    """

    name: str
    property_type: PropertyType = PropertyType.SIMPLE
    value_type: ValueType = ValueType.TEXT

    @classmethod
    def text(cls, name: str) -> Property:
        """Single-valued text property."""
        return cls(name, PropertyType.SIMPLE, ValueType.TEXT)

    @classmethod
    def integer(cls, name: str) -> Property:
        """Single-valued integer property."""
        return cls(name, PropertyType.SIMPLE, ValueType.INTEGER)

    @classmethod
    def date(cls, name: str) -> Property:
        """Single-valued date property."""
        return cls(name, PropertyType.SIMPLE, ValueType.DATE)

    @classmethod
    def multi_valued(cls, name: str, value_type: ValueType = ValueType.TEXT) -> Property:
        """Multi-valued property.

        Typed accessors do not support multi-valued properties; values are
        read and written through the raw string-keyed accessors.
        """
        return cls(name, PropertyType.MULTI_VALUED, value_type)

    @property
    def is_simple(self) -> bool:
        return self.property_type is PropertyType.SIMPLE

    @property
    def is_multi_valued(self) -> bool:
        return self.property_type is PropertyType.MULTI_VALUED

    def __str__(self) -> str:
        return self.name
