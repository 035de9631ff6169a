"""Date normalization for metadata values.

Dates are always written in one canonical UTC pattern and read back by
probing a fixed, ordered list of ISO-8601 variants commonly found in
documents.

All functions here are pure: no formatter or parser state is shared
between calls, so they can be used from any thread.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timezone

from loguru import logger

CANONICAL_DATE_PATTERN = "yyyy-MM-dd'T'HH:mm:ss'Z'"
"""Canonical output pattern. Every written date matches it."""


@dataclass(frozen=True)
class DatePattern:
    """One accepted input layout for date text."""

    label: str
    """Short human-readable name, used in debug logging."""

    fmt: str
    """strptime format string."""

    def parse(self, text: str) -> datetime:
        """Parse text with this layout.

        Layouts without an offset are taken as UTC.

        Raises:
            ValueError: If the text does not match this layout, or its
                offset moves the instant outside the datetime range.
        """
        parsed = datetime.strptime(text, self.fmt)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        try:
            return parsed.astimezone(timezone.utc)
        except OverflowError as e:
            raise ValueError(f"{text!r} is out of range in UTC") from e


# Preference order matters: first match wins.
ISO8601_INPUT_PATTERNS: tuple[DatePattern, ...] = (
    # yyyy-mm-ddThh...
    DatePattern("T-separated, UTC", "%Y-%m-%dT%H:%M:%SZ"),
    DatePattern("T-separated, offset", "%Y-%m-%dT%H:%M:%S%z"),
    DatePattern("T-separated, no offset", "%Y-%m-%dT%H:%M:%S"),
    # yyyy-mm-dd hh...
    DatePattern("space-separated, UTC", "%Y-%m-%d %H:%M:%SZ"),
    DatePattern("space-separated, offset", "%Y-%m-%d %H:%M:%S%z"),
    DatePattern("space-separated, no offset", "%Y-%m-%d %H:%M:%S"),
)


def format_date(value: date) -> str:
    """Format a date or datetime in the canonical UTC pattern.

    Naive datetimes are taken as UTC. A plain date is formatted as
    midnight UTC. Fractional seconds are dropped.

    Args:
        value: Date or datetime to format.

    Returns:
        Text such as "2020-01-02T03:04:05Z".

    Raises:
        ValueError: If converting an aware datetime to UTC leaves the
            datetime range.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            moment = value
        else:
            try:
                moment = value.astimezone(timezone.utc)
            except OverflowError as e:
                raise ValueError(f"{value.isoformat()} is out of range in UTC") from e
    else:
        moment = datetime.combine(value, time())

    # strftime does not zero-pad years before 1000 on every platform
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}Z"
    )


def normalize_offset(text: str) -> str:
    """Rewrite a trailing "+HH:MM" offset to "+HHMM".

    Text shorter than six characters, or whose last six characters do not
    have the offset shape, is returned unchanged.
    """
    if len(text) >= 6 and text[-3] == ":" and text[-6] in "+-":
        return text[:-3] + text[-2:]
    return text


def parse_date(text: str | None) -> datetime | None:
    """Parse date text into an aware UTC datetime.

    The offset suffix is normalized first, then each pattern in
    ISO8601_INPUT_PATTERNS is tried in order.

    Args:
        text: Date text as stored in metadata.

    Returns:
        Aware datetime in UTC, or None if the text is not a recognized date.
    """
    if text is None:
        return None

    candidate = normalize_offset(text)
    for pattern in ISO8601_INPUT_PATTERNS:
        try:
            return pattern.parse(candidate)
        except (ValueError, OverflowError):
            continue

    logger.debug(f"Not a recognized date: {text!r}")
    return None
