"""Episode processing pipeline.

Turns one episode into an uploaded video: render slide -> stage files ->
encode -> build metadata -> upload. Every step failure is wrapped in an
EpisodeError naming the step; nothing is retried.
"""

from __future__ import annotations

import shutil
import tempfile
import warnings
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from podcast_to_youtube.core.errors import EpisodeError, PodcastToYouTubeError
from podcast_to_youtube.core.metadata import build_metadata, render_title
from podcast_to_youtube.core.models import Episode, UploadResult, VideoMetadata
from podcast_to_youtube.services.downloader import download_audio
from podcast_to_youtube.services.encoder import Encoder, FFmpegEncoder
from podcast_to_youtube.services.slide import SlideParams, render_slide, save_png

if TYPE_CHECKING:
    from PIL import Image

    from podcast_to_youtube.core.config import Config

SLIDE_FILENAME = "slide.png"
VIDEO_FILENAME = "vid.mp4"


class Uploader(Protocol):
    def upload(self, metadata: VideoMetadata, video_path: Path) -> dict[str, Any]: ...


@contextmanager
def work_directory() -> Iterator[Path]:
    """Create a temporary directory that is removed on exit.

    Removal failures are reported as warnings and never raised.
    """
    path = Path(tempfile.mkdtemp(prefix="podcast-to-youtube-"))
    try:
        yield path
    finally:
        try:
            shutil.rmtree(path)
        except OSError as e:
            warnings.warn(f"could not remove {path}: {e}", UserWarning, stacklevel=3)


@contextmanager
def _step(episode: Episode, message: str) -> Iterator[None]:
    """Wrap any failure inside the block as an EpisodeError."""
    try:
        yield
    except (PodcastToYouTubeError, OSError, ValueError) as e:
        raise EpisodeError(episode.number, f"{message}: {e}") from e


class EpisodeProcessor:
    """Creates and uploads the video of each episode."""

    def __init__(
        self,
        config: Config,
        uploader: Uploader,
        encoder: Encoder | None = None,
        renderer: Callable[[SlideParams], Image.Image] = render_slide,
        downloader: Callable[[str, Path], Path] = download_audio,
    ) -> None:
        self.config = config
        self.uploader = uploader
        self.encoder = encoder or FFmpegEncoder(config.ffmpeg)
        self.renderer = renderer
        self.downloader = downloader

    def slide_params(self, episode: Episode) -> SlideParams:
        """Return the slide parameters for an episode."""
        return SlideParams(
            logo=self.config.logo,
            text=f"{episode.number}: {episode.title}",
            font=self.config.font,
            foreground=self.config.foreground,
            background=self.config.background,
            width=self.config.width,
            height=self.config.height,
        )

    def metadata(self, episode: Episode) -> VideoMetadata:
        """Return the upload metadata for an episode.

        Raises:
            EpisodeError: If the title template cannot be rendered.
        """
        with _step(episode, "could not create video title from template"):
            title = render_title(self.config.title_template, episode)
        return build_metadata(episode, title, self.config.extra_tags)

    def process(self, episode: Episode) -> UploadResult:
        """Create the video for the episode and upload it.

        Raises:
            EpisodeError: If any step fails.
        """
        with work_directory() as tmp_dir:
            with _step(episode, "could not generate image"):
                image = self.renderer(self.slide_params(episode))

            slide = tmp_dir / SLIDE_FILENAME
            with _step(episode, "could not create image"):
                save_png(image, slide)

            audio = episode.audio_url
            if self.config.download_audio:
                with _step(episode, "could not download audio"):
                    audio = str(self.downloader(episode.audio_url, tmp_dir))

            video = tmp_dir / VIDEO_FILENAME
            with _step(episode, "could not create video"):
                self.encoder.encode(slide, audio, video)

            data = self.metadata(episode)

            with _step(episode, "could not upload to YouTube"):
                response = self.uploader.upload(data, video)

        return UploadResult(episode=episode, response=response)
