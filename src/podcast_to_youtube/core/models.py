"""Data models for podcast-to-youtube."""

from dataclasses import dataclass, field
from typing import Any

UNLISTED = "unlisted"


@dataclass
class Episode:
    """Represents a podcast episode from the RSS feed."""

    title: str
    number: int
    link: str = ""
    description: str = ""
    audio_url: str = ""
    tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class EpisodeRange:
    """Closed interval of episode numbers."""

    first: int
    last: int

    def contains(self, number: int) -> bool:
        """Return True if number lies in [first, last]."""
        return self.first <= number <= self.last


@dataclass(frozen=True)
class VideoMetadata:
    """Metadata sent along with an uploaded video."""

    title: str
    description: str
    tags: list[str] = field(default_factory=list)
    privacy_status: str = UNLISTED

    def to_body(self) -> dict[str, Any]:
        """Return the request body for the videos.insert call."""
        return {
            "snippet": {
                "title": self.title,
                "description": self.description,
                "tags": list(self.tags),
            },
            "status": {"privacyStatus": self.privacy_status},
        }


@dataclass
class UploadResult:
    """An uploaded episode and the platform's raw response."""

    episode: Episode
    response: dict[str, Any]

    @property
    def video_id(self) -> str:
        """Return the id assigned by the platform, if any."""
        return str(self.response.get("id", ""))
