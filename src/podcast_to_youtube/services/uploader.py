"""YouTube uploader."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaFileUpload

from podcast_to_youtube.core.errors import UploadError
from podcast_to_youtube.core.models import VideoMetadata

UPLOAD_PARTS = "snippet,status"
VIDEO_MIMETYPE = "video/mp4"


class YouTubeUploader:
    """Inserts videos into the authenticated user's YouTube channel."""

    def __init__(self, credentials: Any, service: Any | None = None) -> None:
        """
        Initialize the uploader.

        Args:
            credentials: OAuth2 credentials with the upload scope
            service: Prebuilt YouTube API resource (built on first use if None)
        """
        self.credentials = credentials
        self._service = service

    @property
    def service(self) -> Any:
        if self._service is None:
            self._service = build(
                "youtube", "v3", credentials=self.credentials, cache_discovery=False
            )
        return self._service

    def upload(self, metadata: VideoMetadata, video_path: Path) -> dict[str, Any]:
        """
        Upload a video file.

        Args:
            metadata: Title, description, tags and visibility
            video_path: Encoded video file

        Returns:
            The platform's response, unmodified

        Raises:
            UploadError: If the file is missing or the API call fails
        """
        if not video_path.is_file():
            raise UploadError(f"could not open {video_path}")

        media = MediaFileUpload(str(video_path), mimetype=VIDEO_MIMETYPE, resumable=True)
        request = self.service.videos().insert(
            part=UPLOAD_PARTS,
            body=metadata.to_body(),
            media_body=media,
        )

        try:
            response: dict[str, Any] = request.execute()
        except HttpError as e:
            raise UploadError(str(e)) from e
        except (GoogleAuthError, httplib2.HttpLib2Error) as e:
            raise UploadError(f"{type(e).__name__}: {e}") from e
        except OSError as e:
            raise UploadError(f"could not read {video_path}: {e}") from e

        return response
