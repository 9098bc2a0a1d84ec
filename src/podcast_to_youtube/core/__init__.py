"""Core modules for podcast-to-youtube."""

from podcast_to_youtube.core.config import (
    Config,
    load_config,
    parse_hex_color,
)
from podcast_to_youtube.core.errors import (
    ConfigError,
    EpisodeError,
    PodcastToYouTubeError,
)
from podcast_to_youtube.core.models import (
    Episode,
    EpisodeRange,
    UploadResult,
    VideoMetadata,
)
from podcast_to_youtube.core.selection import (
    parse_range,
    select_episodes,
)

__all__ = [
    "Config",
    "ConfigError",
    "Episode",
    "EpisodeError",
    "EpisodeRange",
    "PodcastToYouTubeError",
    "UploadResult",
    "VideoMetadata",
    "load_config",
    "parse_hex_color",
    "parse_range",
    "select_episodes",
]
