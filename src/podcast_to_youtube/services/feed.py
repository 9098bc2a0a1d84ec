"""RSS feed client.

Fetches a podcast RSS feed and decodes its items into Episode records,
in document order.
"""

from __future__ import annotations

import warnings
import xml.sax
from typing import Any
from xml.etree import ElementTree

import feedparser
import httpx

from podcast_to_youtube.core.errors import EmptyFeedError, FeedDecodeError, FeedFetchError
from podcast_to_youtube.core.models import Episode

# Default timeout for feed requests (in seconds)
DEFAULT_TIMEOUT = 30.0

# feedparser stores <itunes:order> as itunes_order and a bare <order> as order
_ORDER_KEYS = ("itunes_order", "order")

# feedparser files <itunes:keywords> and <itunes:category> under this scheme
_ITUNES_TAG_SCHEME = "http://www.itunes.com/"

# Root or container elements that make a document a feed
_CHANNEL_ELEMENTS = frozenset({"channel", "feed"})


def _parse_number(entry: Any) -> int | None:
    """Return the episode number of a feed entry, or None if it has none."""
    for key in _ORDER_KEYS:
        value = entry.get(key)
        if value is None:
            continue
        try:
            return int(str(value).strip())
        except ValueError:
            return None
    return None


def _extract_audio_url(entry: Any) -> str:
    """Return the enclosure URL of a feed entry, or an empty string."""
    for enclosure in entry.get("enclosures", []):
        href = enclosure.get("href") or enclosure.get("url")
        if href:
            return str(href)
    return ""


def _extract_tags(entry: Any) -> list[str]:
    """Return the <category> terms of a feed entry, in document order.

    iTunes keywords and categories also land in ``entry.tags``; they are
    not feed categories and are left out.
    """
    return [
        str(tag["term"])
        for tag in entry.get("tags", [])
        if tag.get("term") and tag.get("scheme") != _ITUNES_TAG_SCHEME
    ]


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _has_channel(content: str | bytes) -> bool:
    """Return True if a well-formed document contains a channel element."""
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError:
        return False
    return any(_local_name(element.tag) in _CHANNEL_ELEMENTS for element in root.iter())


def _parse_feed_entries(feed: Any) -> list[Episode]:
    """Convert feedparser entries into Episode objects.

    Entries without a usable episode number are skipped with a warning.
    """
    episodes: list[Episode] = []

    for entry in feed.entries:
        title = str(entry.get("title", ""))
        number = _parse_number(entry)
        if number is None:
            warnings.warn(
                f"Skipping feed item without an episode number: {title!r}",
                UserWarning,
                stacklevel=2,
            )
            continue

        episodes.append(
            Episode(
                title=title,
                number=number,
                link=str(entry.get("id", "")),
                description=str(entry.get("summary", "")),
                audio_url=_extract_audio_url(entry),
                tags=_extract_tags(entry),
            )
        )

    return episodes


def decode_feed(content: str | bytes, feed_url: str = "") -> list[Episode]:
    """Decode an RSS document into episodes.

    Raises:
        FeedDecodeError: If the document is not a decodable feed.
        EmptyFeedError: If the document has no channel.
    """
    feed = feedparser.parse(content)

    # feedparser falls back to a lenient parser on XML errors and returns
    # whatever it recovered; a partial episode list is never accepted.
    if feed.bozo and isinstance(feed.bozo_exception, xml.sax.SAXException):
        raise FeedDecodeError(f"could not decode feed: {feed.bozo_exception}")

    if feed.bozo and not feed.entries and not feed.feed:
        raise FeedDecodeError(f"could not decode feed: {feed.bozo_exception}")

    if not feed.entries and not feed.feed and not _has_channel(content):
        raise EmptyFeedError(f"feed {feed_url or '<document>'} has no channel")

    return _parse_feed_entries(feed)


def fetch_feed(feed_url: str, timeout: float = DEFAULT_TIMEOUT) -> list[Episode]:
    """Fetch a podcast RSS feed and extract its episodes.

    Args:
        feed_url: URL of the podcast RSS feed.
        timeout: Request timeout in seconds (default: 30.0).

    Returns:
        Episodes in feed order.

    Raises:
        FeedFetchError: If the feed cannot be retrieved.
        FeedDecodeError: If the feed cannot be decoded.
        EmptyFeedError: If the feed has no channel.

    Example:
        >>> episodes = fetch_feed("https://example.com/podcast/feed.xml")
        >>> for ep in episodes:
        ...     print(f"{ep.number}: {ep.title}")
    """
    try:
        with httpx.Client(timeout=timeout, follow_redirects=True) as client:
            response = client.get(feed_url)
            response.raise_for_status()
            content = response.content
    except httpx.HTTPError as e:
        raise FeedFetchError(f"could not get {feed_url}: {e}") from e

    return decode_feed(content, feed_url)
