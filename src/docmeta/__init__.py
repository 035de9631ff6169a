"""docmeta - typed, multi-valued metadata for document extraction."""

from docmeta.core.exceptions import DocMetaError, PropertyTypeMismatch
from docmeta.metadata import (
    Metadata,
    Property,
    PropertyType,
    ValueType,
    format_date,
    parse_date,
)

__version__ = "1.0.0"

__all__ = [
    "DocMetaError",
    "Metadata",
    "Property",
    "PropertyType",
    "PropertyTypeMismatch",
    "ValueType",
    "format_date",
    "parse_date",
]
