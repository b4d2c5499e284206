"""Canonical calendar-date strings.

A canonical date string is an ISO 8601 calendar date written exactly as
``YYYY-MM-DD``, zero padded, proleptic Gregorian. Every value held by a date
field is either ``None`` or a canonical date string.
"""

import datetime
from typing import Optional

import dateutil.parser


ISO_FORMAT = "%Y-%m-%d"


def parse_iso(value: Optional[str]) -> Optional[datetime.date]:
    """Parse an ISO 8601 calendar date, returning None if it cannot be parsed."""
    if not value:
        return None
    try:
        parsed = dateutil.parser.isoparse(value)
    except (ValueError, OverflowError, TypeError):
        return None
    return parsed.date()


def to_iso(date: datetime.date) -> str:
    """Format a date as a canonical YYYY-MM-DD string."""
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def validate(value: Optional[str]) -> Optional[str]:
    """Return value if it is a canonical date string, otherwise None.

    Strings that parse but do not re-serialize to exactly the same text are
    rejected, so "2020-2-1", "20200201" and "2020-02-01T00:00" all return None,
    as do impossible dates such as "2020-02-30".
    """
    if not value or not isinstance(value, str):
        return None
    date = parse_iso(value)
    if date is None or to_iso(date) != value:
        return None
    return value


def today_iso() -> str:
    """Current local date as a canonical string."""
    return to_iso(datetime.date.today())
