"""Configuration for the Baltimore show listing reader."""

import os
from pathlib import Path
from zoneinfo import ZoneInfo

# ---------------------------------------------------------------------------
# Listing page
# ---------------------------------------------------------------------------
SHOWPLACE_URL = os.environ.get("SHOWTIMES_URL", "https://baltshowplace.tumblr.com")
REQUEST_TIMEOUT = int(os.environ.get("SHOWTIMES_TIMEOUT", "15"))  # seconds

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
                  "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
}

# Page structure: each post holds <h2> date headers followed by <p> listings.
# The post title is also an <h2>, marked with the "title" class.
POST_SELECTOR = ".post"
NODE_SELECTOR = "h2:not(.title), p"

# ---------------------------------------------------------------------------
# "Today" is decided in the listings' own timezone
# ---------------------------------------------------------------------------
LOCAL_TZ = ZoneInfo(os.environ.get("SHOWTIMES_TZ", "America/New_York"))

# ---------------------------------------------------------------------------
# Output / state
# ---------------------------------------------------------------------------
CACHE_PATH = Path(os.environ.get("SHOWTIMES_CACHE", str(Path.home() / ".cache" / "showtimes" / "page_cache.json")))
LOG_LEVEL = os.environ.get("SHOWTIMES_LOG_LEVEL", "INFO").upper()
