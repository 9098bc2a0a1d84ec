"""Video encoding with ffmpeg.

Combines a still image and an audio track into a video. The image is
looped for as long as the audio plays.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol

import ffmpeg

from podcast_to_youtube.core.errors import EncodeError

VIDEO_CODEC = "libx264"
AUDIO_CODEC = "aac"
PIXEL_FORMAT = "yuv420p"
QUALITY = 18  # constant rate factor


class Encoder(Protocol):
    """Anything that can turn an image and an audio track into a video."""

    def encode(self, image: Path, audio: str, output: Path) -> None:
        """Write a video to output, raising EncodeError on failure."""
        ...


class FFmpegEncoder:
    """Encodes videos by running the ffmpeg binary.

    ffmpeg must be installed, see https://ffmpeg.org. Its console output is
    not captured so progress shows up in the terminal.
    """

    def __init__(self, binary: str = "ffmpeg") -> None:
        self.binary = binary

    def build(self, image: Path, audio: str, output: Path) -> Any:
        """Return the ffmpeg-python stream for one encode."""
        still = ffmpeg.input(str(image), loop=1)
        track = ffmpeg.input(str(audio))
        return ffmpeg.output(
            still,
            track,
            str(output),
            shortest=None,
            vcodec=VIDEO_CODEC,
            pix_fmt=PIXEL_FORMAT,
            acodec=AUDIO_CODEC,
            crf=QUALITY,
        ).overwrite_output()

    def arguments(self, image: Path, audio: str, output: Path) -> list[str]:
        """Return the full command line that encode would run."""
        return list(ffmpeg.compile(self.build(image, audio, output), cmd=self.binary))

    def encode(self, image: Path, audio: str, output: Path) -> None:
        """Encode the video.

        Raises:
            EncodeError: If ffmpeg cannot be started or exits non-zero.
        """
        stream = self.build(image, audio, output)
        try:
            ffmpeg.run(stream, cmd=self.binary)
        except ffmpeg.Error as e:
            raise EncodeError(f"{self.binary} failed: {e}") from e
        except OSError as e:
            raise EncodeError(f"could not run {self.binary}: {e}") from e
