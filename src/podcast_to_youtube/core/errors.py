"""Custom exceptions for podcast-to-youtube."""


class PodcastToYouTubeError(Exception):
    """Base exception for all podcast-to-youtube errors."""

    pass


class ConfigError(PodcastToYouTubeError):
    """Configuration-related errors."""

    pass


class FeedError(PodcastToYouTubeError):
    """RSS feed errors."""

    pass


class FeedFetchError(FeedError):
    """The feed could not be retrieved."""

    pass


class FeedDecodeError(FeedError):
    """The feed body is not a decodable RSS document."""

    pass


class EmptyFeedError(FeedError):
    """The feed document has no channel."""

    pass


class RangeParseError(PodcastToYouTubeError):
    """An episode range could not be parsed."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"{text} is an invalid range")


class NoEpisodesSelectedError(PodcastToYouTubeError):
    """No episode of the feed falls in the requested range."""

    def __init__(self) -> None:
        super().__init__("no episodes selected")


class AuthError(PodcastToYouTubeError):
    """OAuth2 authentication errors."""

    pass


class SlideError(PodcastToYouTubeError):
    """Slide image rendering errors."""

    pass


class DownloadError(PodcastToYouTubeError):
    """Audio download errors."""

    pass


class EncodeError(PodcastToYouTubeError):
    """Video encoding errors."""

    pass


class TemplateError(PodcastToYouTubeError):
    """Title template errors."""

    pass


class UploadError(PodcastToYouTubeError):
    """YouTube upload errors."""

    pass


class EpisodeError(PodcastToYouTubeError):
    """Processing of a single episode failed.

    The message names the failing step; the underlying exception is
    available as ``__cause__``.
    """

    def __init__(self, number: int, message: str) -> None:
        self.number = number
        self.message = message
        super().__init__(message)
