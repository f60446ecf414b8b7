"""Date header parsing.

Headers on the listing page read like "Saturday, February 15, 2025". A blank
header (the page sometimes has empty <h2> elements) means "no date" and is
not an error.
"""

from datetime import date
from string import digits
from typing import Optional

from .models import InvalidDateError, MalformedDateError

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def parse_date(text: str) -> Optional[date]:
    """Parse a 'Weekday, Month Day, Year' header into a date.

    Returns None for blank headers. Raises MalformedDateError when the text
    doesn't have that shape and InvalidDateError when it does but the day
    doesn't exist (e.g. February 30).
    """
    text = text.strip()
    if not text:
        return None

    parts = text.split(", ")
    if len(parts) != 3:
        raise MalformedDateError(f"expected 'Weekday, Month Day, Year', got {text!r}")
    _weekday, month_day, year_str = parts

    tokens = month_day.split()
    if len(tokens) != 2:
        raise MalformedDateError(f"expected 'Month Day', got {month_day!r}")
    month_name, day_str = tokens

    if month_name not in MONTHS:
        raise MalformedDateError(f"unknown month {month_name!r}")
    month = MONTHS.index(month_name) + 1

    if not (_is_number(day_str) and _is_number(year_str)):
        raise MalformedDateError(f"non-numeric day or year in {text!r}")
    year = int(year_str)
    day = int(day_str)

    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"{text!r} is not a calendar date: {e}")


def _is_number(text: str) -> bool:
    """Non-empty and ASCII digits only."""
    return bool(text) and all(c in digits for c in text)
