"""Data models for show listings and the matcher result contract."""

from dataclasses import dataclass


@dataclass
class Event:
    """A single show parsed from one listing line."""
    performers: str
    time: str  # e.g. "7PM" or "9AM-12PM"
    price: str  # e.g. "$15", "$10-$20" or "$FREE"
    location: str

    @property
    def display_line(self) -> str:
        """Format as 'PERFORMERS at LOCATION, TIME, PRICE'."""
        return f"{self.performers} at {self.location}, {self.time}, {self.price}"


@dataclass
class TextNode:
    """Plain text of one page node, classified as a date header or a listing line."""
    text: str
    is_header: bool = False


@dataclass(frozen=True)
class Match:
    """Successful match: the consumed text and what is left of the input."""
    text: str
    rest: str


@dataclass(frozen=True)
class NoMatch:
    """Failed match. Always carries the input the matcher was given, untouched."""
    input: str

    def __bool__(self) -> bool:
        return False


class DateParseError(ValueError):
    """A date header could not be turned into a calendar date."""


class MalformedDateError(DateParseError):
    """Header is not of the form 'Weekday, Month Day, Year'."""


class InvalidDateError(DateParseError):
    """Header is well-formed but names a day the calendar doesn't have."""
