"""Audio downloader for podcast-to-youtube.

Downloads an episode's audio enclosure into the episode's work directory
when the encoder should read a local file instead of streaming the URL.
"""

from __future__ import annotations

import hashlib
from pathlib import Path
from urllib.parse import unquote, urlparse

import httpx

from podcast_to_youtube.core.errors import DownloadError

# Default timeout for downloads (in seconds)
DEFAULT_TIMEOUT = 300.0  # 5 minutes for large media files

# Chunk size for streaming downloads (64KB)
CHUNK_SIZE = 65536


def _extract_filename_from_url(url: str) -> str:
    """Extract a filename from a URL.

    Args:
        url: The URL to extract filename from.

    Returns:
        Extracted filename or a hash-based fallback.
    """
    parsed = urlparse(url)
    path = unquote(parsed.path)

    if path:
        filename = Path(path).name
        if filename and "." in filename:
            return filename

    url_hash = hashlib.md5(url.encode()).hexdigest()[:12]
    return f"audio_{url_hash}"


def _remove_partial(dest_path: Path) -> None:
    if dest_path.exists():
        dest_path.unlink()


def download_audio(
    url: str,
    dest_dir: Path,
    timeout: float = DEFAULT_TIMEOUT,
) -> Path:
    """Download an audio file from URL into a directory.

    Args:
        url: URL of the audio file to download.
        dest_dir: Existing directory the file is written into.
        timeout: Request timeout in seconds.

    Returns:
        Path to the downloaded file.

    Raises:
        DownloadError: If download fails for any reason.
    """
    if not url:
        raise DownloadError("episode has no audio URL")

    dest_path = dest_dir / _extract_filename_from_url(url)

    try:
        with httpx.stream("GET", url, timeout=timeout, follow_redirects=True) as response:
            response.raise_for_status()

            with open(dest_path, "wb") as f:
                for chunk in response.iter_bytes(chunk_size=CHUNK_SIZE):
                    f.write(chunk)

        return dest_path

    except httpx.TimeoutException as e:
        _remove_partial(dest_path)
        raise DownloadError(f"Download timed out for {url}: {e}") from e

    except httpx.HTTPStatusError as e:
        _remove_partial(dest_path)
        raise DownloadError(
            f"HTTP error {e.response.status_code} downloading {url}: {e}"
        ) from e

    except httpx.RequestError as e:
        _remove_partial(dest_path)
        raise DownloadError(f"Failed to download {url}: {e}") from e

    except OSError as e:
        _remove_partial(dest_path)
        raise DownloadError(f"Failed to write file {dest_path}: {e}") from e
