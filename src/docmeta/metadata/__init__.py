"""Typed, multi-valued document metadata.

Subpackage layout
-----------------
property
    Property descriptors: Property, PropertyType, ValueType
dates
    Canonical date formatting and tolerant ISO-8601 parsing
container
    Metadata, the multi-valued key/values store
keys
    Well-known property descriptors (Dublin Core, MS Office, TIFF, ...)

Example
-------
>>> from docmeta.metadata import Metadata
>>> from docmeta.metadata.keys import DublinCore, MSOffice
>>>
>>> metadata = Metadata()
>>> metadata.set(DublinCore.TITLE, "Quarterly report")
>>> metadata.set(MSOffice.PAGE_COUNT, 12)
>>> metadata.get_int(MSOffice.PAGE_COUNT)
12
"""

from docmeta.metadata.container import Metadata
from docmeta.metadata.dates import (
    CANONICAL_DATE_PATTERN,
    ISO8601_INPUT_PATTERNS,
    DatePattern,
    format_date,
    normalize_offset,
    parse_date,
)
from docmeta.metadata.property import Property, PropertyType, ValueType

__all__ = [
    # Container
    "Metadata",
    # Descriptors
    "Property",
    "PropertyType",
    "ValueType",
    # Dates
    "CANONICAL_DATE_PATTERN",
    "ISO8601_INPUT_PATTERNS",
    "DatePattern",
    "format_date",
    "normalize_offset",
    "parse_date",
]
