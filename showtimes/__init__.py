"""Read show listings (performers, time, price, venue) off a free-text listing page."""

from .assemble import events_on, group_events
from .date_utils import parse_date
from .grammar import parse_event
from .models import (
    DateParseError,
    Event,
    InvalidDateError,
    MalformedDateError,
    TextNode,
)

__version__ = "0.1.0"

__all__ = [
    "DateParseError",
    "Event",
    "InvalidDateError",
    "MalformedDateError",
    "TextNode",
    "events_on",
    "group_events",
    "parse_date",
    "parse_event",
]
