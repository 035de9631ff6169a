"""Well-known metadata properties.

Extractors and consumers share these descriptors so that a value written
as, say, ``MSOffice.PAGE_COUNT`` by an Office extractor can be read back
with ``metadata.get_int(MSOffice.PAGE_COUNT)`` by an indexer.

Properties are grouped by the vocabulary they come from.
"""

from __future__ import annotations

from docmeta.metadata.property import Property


class DublinCore:
    """Dublin Core element set."""

    FORMAT = Property.text("format")
    IDENTIFIER = Property.text("identifier")
    MODIFIED = Property.date("modified")
    CONTRIBUTOR = Property.text("contributor")
    COVERAGE = Property.text("coverage")
    CREATOR = Property.text("creator")
    DATE = Property.date("date")
    DESCRIPTION = Property.text("description")
    LANGUAGE = Property.text("language")
    PUBLISHER = Property.text("publisher")
    RELATION = Property.text("relation")
    RIGHTS = Property.text("rights")
    SOURCE = Property.text("source")
    SUBJECT = Property.text("subject")
    TITLE = Property.text("title")
    TYPE = Property.text("type")


class MSOffice:
    """Document summary properties written by office suites."""

    KEYWORDS = Property.text("Keywords")
    COMMENTS = Property.text("Comments")
    LAST_AUTHOR = Property.text("Last-Author")
    APPLICATION_NAME = Property.text("Application-Name")
    AUTHOR = Property.text("Author")
    COMPANY = Property.text("Company")
    REVISION_NUMBER = Property.text("Revision-Number")
    PAGE_COUNT = Property.integer("Page-Count")
    WORD_COUNT = Property.integer("Word-Count")
    CHARACTER_COUNT = Property.integer("Character-Count")
    CREATION_DATE = Property.date("Creation-Date")
    LAST_SAVED = Property.date("Last-Save-Date")
    LAST_PRINTED = Property.date("Last-Printed")


class TIFF:
    """Image properties from TIFF and EXIF tags."""

    BITS_PER_SAMPLE = Property.integer("tiff:BitsPerSample")
    IMAGE_LENGTH = Property.integer("tiff:ImageLength")
    IMAGE_WIDTH = Property.integer("tiff:ImageWidth")
    SAMPLES_PER_PIXEL = Property.integer("tiff:SamplesPerPixel")
    EQUIPMENT_MAKE = Property.text("tiff:Make")
    EQUIPMENT_MODEL = Property.text("tiff:Model")
    ORIENTATION = Property.text("tiff:Orientation")
    ORIGINAL_DATE = Property.date("exif:DateTimeOriginal")


class HttpHeaders:
    """HTTP entity headers, as recorded for fetched documents."""

    CONTENT_ENCODING = Property.text("Content-Encoding")
    CONTENT_LANGUAGE = Property.text("Content-Language")
    CONTENT_LENGTH = Property.integer("Content-Length")
    CONTENT_LOCATION = Property.text("Content-Location")
    CONTENT_DISPOSITION = Property.text("Content-Disposition")
    CONTENT_MD5 = Property.text("Content-MD5")
    CONTENT_TYPE = Property.text("Content-Type")
    LAST_MODIFIED = Property.date("Last-Modified")
    LOCATION = Property.text("Location")


class Message:
    """Mail message addressing. Every field can repeat."""

    MESSAGE_FROM = Property.multi_valued("Message-From")
    MESSAGE_TO = Property.multi_valued("Message-To")
    MESSAGE_CC = Property.multi_valued("Message-Cc")
    MESSAGE_BCC = Property.multi_valued("Message-Bcc")
    MESSAGE_RECIPIENT_ADDRESS = Property.multi_valued("Message-Recipient-Address")


class Geographic:
    """WGS84 position, stored as decimal text."""

    LATITUDE = Property.text("geo:lat")
    LONGITUDE = Property.text("geo:long")
    ALTITUDE = Property.text("geo:alt")


class CreativeCommons:
    """Creative Commons licensing terms."""

    LICENSE_URL = Property.text("License-Url")
    LICENSE_LOCATION = Property.text("License-Location")
    WORK_TYPE = Property.text("Work-Type")


class DocumentKeys:
    """Keys describing the document itself rather than its content."""

    RESOURCE_NAME = Property.text("resourceName")
    PROTECTED = Property.text("protected")


_VOCABULARIES = (
    DublinCore,
    MSOffice,
    TIFF,
    HttpHeaders,
    Message,
    Geographic,
    CreativeCommons,
    DocumentKeys,
)


def all_properties() -> list[Property]:
    """Get every well-known property, grouped by vocabulary."""
    return [
        value
        for vocabulary in _VOCABULARIES
        for value in vars(vocabulary).values()
        if isinstance(value, Property)
    ]


_BY_NAME: dict[str, Property] = {prop.name: prop for prop in all_properties()}


def lookup(name: str) -> Property | None:
    """Get the well-known property for a metadata name.

    Args:
        name: Metadata name, e.g. "Page-Count".

    Returns:
        The matching Property, or None if the name is not well known.
    """
    return _BY_NAME.get(name)
