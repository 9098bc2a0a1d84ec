"""Tests for the YouTube uploader."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import httplib2
import pytest
from google.auth.exceptions import RefreshError, TransportError
from googleapiclient.errors import HttpError

from podcast_to_youtube.core.errors import UploadError
from podcast_to_youtube.core.models import VideoMetadata
from podcast_to_youtube.services.uploader import YouTubeUploader


@pytest.fixture
def metadata() -> VideoMetadata:
    return VideoMetadata(
        title="Kubernetes at Scale: GCPPodcast 42",
        description="Original post: https://example.com/post/42\n\nWe talk about clusters.",
        tags=["kubernetes", "podcast"],
    )


@pytest.fixture
def video(tmp_path: Path) -> Path:
    path = tmp_path / "vid.mp4"
    path.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return path


class TestUpload:
    """Tests for YouTubeUploader.upload."""

    def test_insert_call(self, metadata: VideoMetadata, video: Path) -> None:
        service = MagicMock()
        insert = service.videos.return_value.insert
        insert.return_value.execute.return_value = {"id": "abc123", "kind": "youtube#video"}

        response = YouTubeUploader(credentials=None, service=service).upload(metadata, video)

        assert response == {"id": "abc123", "kind": "youtube#video"}
        _, kwargs = insert.call_args
        assert kwargs["part"] == "snippet,status"
        assert kwargs["body"] == metadata.to_body()
        assert kwargs["body"]["status"]["privacyStatus"] == "unlisted"
        assert kwargs["media_body"].mimetype() == "video/mp4"

    def test_missing_file(self, metadata: VideoMetadata, tmp_path: Path) -> None:
        service = MagicMock()

        with pytest.raises(UploadError, match="could not open"):
            YouTubeUploader(None, service=service).upload(metadata, tmp_path / "vid.mp4")

        service.videos.assert_not_called()

    def test_api_error(self, metadata: VideoMetadata, video: Path) -> None:
        service = MagicMock()
        resp = MagicMock(status=403, reason="Forbidden")
        service.videos.return_value.insert.return_value.execute.side_effect = HttpError(
            resp, b'{"error": {"message": "quotaExceeded"}}'
        )

        with pytest.raises(UploadError):
            YouTubeUploader(None, service=service).upload(metadata, video)

    @pytest.mark.parametrize(
        "error",
        [
            TransportError("dns fail"),
            RefreshError("invalid_grant: token expired"),
            httplib2.ServerNotFoundError("Unable to find the server at youtube.googleapis.com"),
        ],
    )
    def test_transport_and_token_errors(
        self, metadata: VideoMetadata, video: Path, error: Exception
    ) -> None:
        service = MagicMock()
        service.videos.return_value.insert.return_value.execute.side_effect = error

        with pytest.raises(UploadError, match=type(error).__name__):
            YouTubeUploader(None, service=service).upload(metadata, video)


class TestService:
    """Tests for building the API client."""

    @patch("podcast_to_youtube.services.uploader.build")
    def test_built_once_with_credentials(self, mock_build: MagicMock) -> None:
        credentials = object()
        uploader = YouTubeUploader(credentials)

        assert uploader.service is uploader.service
        mock_build.assert_called_once_with(
            "youtube", "v3", credentials=credentials, cache_discovery=False
        )
