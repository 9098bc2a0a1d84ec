"""Service modules for podcast-to-youtube."""

from podcast_to_youtube.services.auth import authenticate
from podcast_to_youtube.services.downloader import download_audio
from podcast_to_youtube.services.encoder import Encoder, FFmpegEncoder
from podcast_to_youtube.services.feed import decode_feed, fetch_feed
from podcast_to_youtube.services.slide import SlideParams, render_slide, save_png
from podcast_to_youtube.services.uploader import YouTubeUploader

__all__ = [
    "Encoder",
    "FFmpegEncoder",
    "SlideParams",
    "YouTubeUploader",
    "authenticate",
    "decode_feed",
    "download_audio",
    "fetch_feed",
    "render_slide",
    "save_png",
]
