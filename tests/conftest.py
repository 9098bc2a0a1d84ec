"""Pytest fixtures for podcast-to-youtube tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from podcast_to_youtube.core.config import Config
from podcast_to_youtube.core.models import Episode

RSS_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">
  <channel>
    <title>Test Podcast</title>
    <description>A test podcast</description>
    {items}
  </channel>
</rss>
"""

ITEM_TEMPLATE = """\
<item>
  <title>{title}</title>
  <guid isPermaLink="true">{link}</guid>
  <itunes:order>{number}</itunes:order>
  <description>{description}</description>
  <enclosure url="{audio_url}" type="audio/mpeg" length="12345"/>
  {categories}
</item>
"""


def create_rss_feed(items: list[dict]) -> str:
    """Create an RSS feed string from item data."""
    items_xml = "\n".join(
        ITEM_TEMPLATE.format(
            title=item.get("title", "Episode"),
            link=item.get("link", "https://example.com/post"),
            number=item.get("number", 1),
            description=item.get("description", "About this episode"),
            audio_url=item.get("audio_url", "https://example.com/episode.mp3"),
            categories="".join(
                f"<category>{tag}</category>" for tag in item.get("tags", [])
            ),
        )
        for item in items
    )
    return RSS_TEMPLATE.format(items=items_xml)


@pytest.fixture
def make_feed():
    """Return the RSS feed builder."""
    return create_rss_feed


@pytest.fixture
def sample_episode() -> Episode:
    """Create a sample episode for testing."""
    return Episode(
        title="Kubernetes at Scale",
        number=42,
        link="https://example.com/post/42",
        description="<p>We talk about\n<b>clusters</b>.</p>",
        audio_url="https://example.com/audio/42.mp3",
        tags=["kubernetes", "containers"],
    )


@pytest.fixture
def sample_rss_feed() -> str:
    """Create a sample RSS feed numbered 1, 2, 3 and 5."""
    return create_rss_feed(
        [
            {"title": "Episode Five", "number": 5, "link": "https://example.com/5"},
            {"title": "Episode Three", "number": 3, "link": "https://example.com/3"},
            {"title": "Episode Two", "number": 2, "link": "https://example.com/2"},
            {"title": "Episode One", "number": 1, "link": "https://example.com/1"},
        ]
    )


@pytest.fixture
def logo_path(tmp_path: Path) -> Path:
    """Write a small logo image and return its path."""
    path = tmp_path / "logo.png"
    Image.new("RGBA", (40, 20), (255, 0, 0, 255)).save(path)
    return path


@pytest.fixture
def sample_config(logo_path: Path) -> Config:
    """Create a small configuration for testing."""
    return Config(
        logo=str(logo_path),
        font="resources/Roboto-Light.ttf",
        width=320,
        height=180,
        tags="podcast,gcppodcast",
    )
