"""Grammar for a single show listing line.

Listings look like::

    Thonian Horde, The Edge Of Desolation, Revvnant. 7PM, $15 @ Ottobar
    Contact Mic: Open Experimental Jam Series - 7:30PM, $FREE @ Wax Atlas

i.e. ``{performers}. {time}, {price} @ {location}``, where the separator
before the time is either ". " or " - ".
"""

from typing import Optional

from .combinators import (
    Result,
    alternation,
    digit,
    literal,
    one_or_more,
    optional,
    rest,
    scan_until,
    sequence,
)
from .models import Event

number = one_or_more(digit)

# 7PM, 7:30PM
single_time = sequence([
    number,
    optional(sequence([literal(":"), number])),
    alternation([literal("AM"), literal("PM")]),
])

# $15, $FREE
single_price = sequence([
    literal("$"),
    alternation([literal("FREE"), number]),
])

# Either may be a range: 9AM-12PM, $10-$20
time_token = sequence([single_time, optional(sequence([literal("-"), single_time]))])
price_token = sequence([single_price, optional(sequence([literal("-"), single_price]))])

separator = alternation([literal(". "), literal(" - ")])

# A separator only counts when a time follows it. Periods inside band names
# ("Dr. Dog", "B.B. King") are skipped over this way.
time_boundary = alternation([
    sequence([literal(". "), time_token]),
    sequence([literal(" - "), time_token]),
])


def parse_time(text: str) -> Result:
    """Match a time or time range at the start of ``text``.

        >>> parse_time("9AM-12PM, $10 @ Red Emma's")
        Match(text='9AM-12PM', rest=", $10 @ Red Emma's")
    """
    return time_token(text)


def parse_price(text: str) -> Result:
    """Match a price or price range at the start of ``text``."""
    return price_token(text)


def parse_event(line: str) -> Optional[Event]:
    """Parse one listing line into an Event.

    Returns None for blank lines and for anything that doesn't fit the
    listing shape; callers are expected to just skip those.
    """
    line = line.strip()
    if not line:
        return None

    performers = scan_until(time_boundary, line)
    if not performers:
        return None

    sep = separator(performers.rest)
    if not sep:
        return None

    time = parse_time(sep.rest)
    if not time:
        return None

    comma = literal(", ")(time.rest)
    if not comma:
        return None

    price = parse_price(comma.rest)
    if not price:
        return None

    at = literal(" @ ")(price.rest)
    if not at:
        return None

    location = rest(at.rest)
    if location.rest:
        return None

    return Event(
        performers=performers.text.strip(),
        time=time.text.strip(),
        price=price.text.strip(),
        location=location.text.strip(),
    )
