"""Baltimore Show Place listing page.

The page is a Tumblr blog; every post lists a week of shows as a run of
<h2> date headers, each followed by one <p> per show.
"""

import hashlib
import logging
from typing import List

import requests
from bs4 import BeautifulSoup, Tag

from ..config import HEADERS, NODE_SELECTOR, POST_SELECTOR, REQUEST_TIMEOUT, SHOWPLACE_URL
from ..models import TextNode

logger = logging.getLogger("showtimes.showplace")


def fetch(url: str = SHOWPLACE_URL) -> str:
    """Download the listing page and return its HTML."""
    response = requests.get(url, headers=HEADERS, timeout=REQUEST_TIMEOUT)
    response.raise_for_status()
    logger.debug(f"Fetched {url} ({len(response.text)} chars)")
    return response.text


def select_posts(html: str) -> List[Tag]:
    """Return the post elements of the page."""
    soup = BeautifulSoup(html, "html.parser")
    posts = soup.select(POST_SELECTOR)
    if not posts:
        logger.warning(f"No '{POST_SELECTOR}' elements found, page structure may have changed")
    return posts


def extract_nodes(posts: List[Tag]) -> List[TextNode]:
    """Flatten the posts into date headers and listing lines, in page order."""
    nodes = []
    for post in posts:
        for el in post.select(NODE_SELECTOR):
            nodes.append(TextNode(text=el.get_text(), is_header=el.name == "h2"))
    return nodes


def hash_document(posts: List[Tag]) -> str:
    """MD5 of the posts' markup, for telling whether the listings changed."""
    raw = "".join(str(post) for post in posts)
    return hashlib.md5(raw.encode("utf-8")).hexdigest()
