#!/usr/bin/env python3
"""Showtimes main runner

Fetches the listing page, checks whether it changed since the last run,
groups the listings by date and prints the shows for one day.

Usage:
    python -m showtimes.main                       # Today's shows
    python -m showtimes.main --date 2025-02-15     # Another day
    python -m showtimes.main --file page.html      # Read a saved page
    python -m showtimes.main --dry-run             # Don't update the cache
"""

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional

import requests

from .assemble import events_on, group_events
from .config import CACHE_PATH, LOCAL_TZ, LOG_LEVEL, SHOWPLACE_URL
from .models import Event
from .sources import showplace

logger = logging.getLogger("showtimes")


# ---------------------------------------------------------------------------
# Cache helpers
# ---------------------------------------------------------------------------

def _load_cache() -> dict:
    """Load the page cache file. Returns empty structure on any error."""
    try:
        if CACHE_PATH.exists():
            with open(CACHE_PATH, "r") as f:
                data = json.load(f)
            if isinstance(data, dict) and "page_hash" in data:
                return data
    except (json.JSONDecodeError, TypeError, OSError) as e:
        logger.warning(f"Cache file corrupt or unreadable ({e}), starting fresh")
    return {"page_hash": None, "fetched_at": None}


def _save_cache(cache: dict) -> None:
    """Write the page cache to CACHE_PATH."""
    CACHE_PATH.parent.mkdir(parents=True, exist_ok=True)
    with open(CACHE_PATH, "w", encoding="utf-8") as f:
        json.dump(cache, f, indent=2)
    logger.debug(f"Wrote {CACHE_PATH}")


# ---------------------------------------------------------------------------
# Main execution
# ---------------------------------------------------------------------------

def run(day: Optional[date] = None, html_path: Optional[Path] = None, dry_run: bool = False) -> int:
    """Main execution: fetch → hash → group → print."""
    day = day or datetime.now(LOCAL_TZ).date()

    if html_path:
        html = html_path.read_text(encoding="utf-8")
    else:
        try:
            html = showplace.fetch()
        except requests.exceptions.RequestException as e:
            logger.error(f"Could not fetch {SHOWPLACE_URL}: {e}")
            return 1

    posts = showplace.select_posts(html)

    cache = _load_cache()
    page_hash = showplace.hash_document(posts)
    if page_hash == cache.get("page_hash"):
        logger.info("Listings unchanged since last run")
    else:
        logger.info(f"Listings changed (hash {page_hash})")
        if not dry_run:
            try:
                _save_cache({"page_hash": page_hash, "fetched_at": datetime.now(LOCAL_TZ).isoformat()})
            except OSError as e:
                logger.warning(f"Could not write cache {CACHE_PATH} ({e}), continuing")

    events_by_date = group_events(showplace.extract_nodes(posts))
    total = sum(len(events) for events in events_by_date.values())
    logger.info(f"Parsed {total} event(s) across {len(events_by_date)} date(s)")

    _print_day(day, events_on(events_by_date, day))
    return 0


def _print_day(day: date, events: List[Event]) -> None:
    """Print the shows for one day."""
    print(f"Events on {day.isoformat()}:")
    for event in events:
        print(event.display_line)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the day's shows from the listing page.")
    parser.add_argument("--date", type=date.fromisoformat, help="day to show (YYYY-MM-DD), default today")
    parser.add_argument("--file", type=Path, help="read a saved copy of the page instead of fetching")
    parser.add_argument("--dry-run", action="store_true", help="don't update the page cache")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return run(day=args.date, html_path=args.file, dry_run=args.dry_run)


if __name__ == "__main__":
    sys.exit(main())
