"""Calendar date helpers.

Taskbot only deals in calendar dates: there is no time of day and no
timezone. Two textual forms exist:

- the compact storage/input form ``yyyy/mm/dd`` (``2024/11/11``)
- the long display form ``dd Month yyyy`` (``11 November 2024``)
"""

import re
from datetime import date, datetime
from typing import Optional

STORAGE_DATE_FORMAT = "%Y/%m/%d"
DISPLAY_DATE_FORMAT = "%d %B %Y"

_COMPACT_DATE_RE = re.compile(r"^\d{4}/\d{2}/\d{2}$")


def today() -> date:
    """Return the current local calendar date."""
    return date.today()


def parse_date(date_str: str) -> Optional[date]:
    """Parse a compact ``yyyy/mm/dd`` date.

    Args:
        date_str: Text to parse; surrounding whitespace is ignored.

    Returns:
        The parsed date, or None if the text is not a real calendar date
        written with fixed-width fields.
    """
    if date_str is None:
        return None
    candidate = date_str.strip()
    if not _COMPACT_DATE_RE.match(candidate):
        return None
    try:
        return datetime.strptime(candidate, STORAGE_DATE_FORMAT).date()
    except ValueError:
        return None


def format_date_for_storage(value: date) -> str:
    """Format a date as ``yyyy/mm/dd``, zero padding years before 1000."""
    return f"{value.year:04d}/{value.month:02d}/{value.day:02d}"


def format_date_for_display(value: date) -> str:
    """Format a date as ``11 November 2024``."""
    return value.strftime(DISPLAY_DATE_FORMAT)
