"""Group parsed listings under the date header they appear beneath.

The page is a flat run of nodes: an <h2> date header followed by the <p>
listing lines for that date, then the next header, and so on.
"""

import logging
from datetime import date
from itertools import groupby
from typing import Dict, Iterable, List

from .date_utils import parse_date
from .grammar import parse_event
from .models import DateParseError, Event, InvalidDateError, TextNode

logger = logging.getLogger("showtimes.assemble")


def group_events(nodes: Iterable[TextNode]) -> Dict[str, List[Event]]:
    """Build an ISO date -> events mapping from classified page nodes.

    Dates appear in document order. A group whose header is blank or can't
    be parsed is dropped entirely, and listing lines that don't parse are
    skipped. If the same date heads more than one group, the later group's
    events are appended to the earlier ones.
    """
    by_date: Dict[str, List[Event]] = {}

    runs = [(is_header, list(run)) for is_header, run in groupby(nodes, key=lambda n: n.is_header)]

    i = 0
    while i < len(runs):
        is_header, run = runs[i]
        if not is_header:
            logger.debug(f"Skipping {len(run)} line(s) with no date header above them")
            i += 1
            continue

        if len(run) > 1:
            logger.debug(f"{len(run)} headers in a row, using {run[0].text.strip()!r}")

        body: List[TextNode] = []
        if i + 1 < len(runs):
            body = runs[i + 1][1]
        i += 2

        header = run[0].text
        try:
            day = parse_date(header)
        except InvalidDateError as e:
            logger.warning(f"Dropping {len(body)} line(s) under invalid date: {e}")
            continue
        except DateParseError as e:
            logger.warning(f"Dropping {len(body)} line(s) under malformed header: {e}")
            continue

        if day is None:
            logger.debug(f"Dropping {len(body)} line(s) under blank header")
            continue

        events = []
        for node in body:
            event = parse_event(node.text)
            if event is None:
                if node.text.strip():
                    logger.debug(f"Unparseable listing: {node.text.strip()!r}")
                continue
            events.append(event)

        key = day.isoformat()
        if key in by_date:
            logger.info(f"Date {key} appears under more than one header, merging")
        by_date.setdefault(key, []).extend(events)

    return by_date


def events_on(events_by_date: Dict[str, List[Event]], day: date) -> List[Event]:
    """Events listed for ``day``, or an empty list if the page has none."""
    return events_by_date.get(day.isoformat(), [])
