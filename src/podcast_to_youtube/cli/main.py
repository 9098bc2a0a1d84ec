"""Command-line interface for podcast-to-youtube."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console

from podcast_to_youtube import __version__
from podcast_to_youtube.cli.output import display_selected, display_upload
from podcast_to_youtube.core.config import (
    DEFAULT_FEED_URL,
    DEFAULT_TITLE_TEMPLATE,
    Config,
    load_config,
    parse_hex_color,
)
from podcast_to_youtube.core.errors import (
    AuthError,
    ConfigError,
    EpisodeError,
    FeedError,
    NoEpisodesSelectedError,
    RangeParseError,
)
from podcast_to_youtube.core.metadata import validate_title_template
from podcast_to_youtube.core.pipeline import EpisodeProcessor
from podcast_to_youtube.core.selection import parse_range, select_episodes
from podcast_to_youtube.services.auth import authenticate
from podcast_to_youtube.services.feed import fetch_feed
from podcast_to_youtube.services.uploader import YouTubeUploader

console = Console()

AFFIRMATIVE_ANSWERS = {"Y", "y", ""}


class HexColor(click.ParamType):
    """A hex encoded colour such as ``#009688``."""

    name = "hexcolor"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, tuple):
            return value
        try:
            return parse_hex_color(str(value))
        except ConfigError as e:
            self.fail(str(e), param, ctx)


def _check_template(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return value
    try:
        validate_title_template(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    return value


def fail(message: str) -> NoReturn:
    """Print message to stderr and exit with status 1."""
    click.echo(message, err=True)
    sys.exit(1)


def run(config: Config) -> None:
    """Fetch, select, confirm, authenticate and publish."""
    try:
        episodes = fetch_feed(config.feed_url)
    except FeedError as e:
        fail(str(e))

    answer = click.prompt(
        "episode number to publish (try 1, or 2-10)", default="", show_default=False
    )
    try:
        selected = select_episodes(episodes, parse_range(answer))
    except (RangeParseError, NoEpisodesSelectedError) as e:
        fail(str(e))

    display_selected(selected, console)

    answer = click.prompt("publish? (Y/n)", default="", show_default=False)
    if answer.strip() not in AFFIRMATIVE_ANSWERS:
        return

    try:
        credentials = authenticate(config.client_secrets)
    except AuthError as e:
        fail(f"could not authenticate with YouTube: {e}")

    processor = EpisodeProcessor(config, YouTubeUploader(credentials))
    for episode in selected:
        try:
            result = processor.process(episode)
        except EpisodeError as e:
            fail(f"episode {e.number}: {e}")
        display_upload(result, console)


@click.command()
@click.option("--rss", "feed_url", help=f"URL for the RSS feed [default: {DEFAULT_FEED_URL}]")
@click.option("--logo", help="Path to the logo image. Supports PNG, GIF, and JPEG")
@click.option("--font", help="TrueType font to be used in the video")
@click.option(
    "--title",
    "title_template",
    callback=_check_template,
    help=f"Template used for the title, fields {{title}} and {{number}} "
    f"[default: {DEFAULT_TITLE_TEMPLATE}]",
)
@click.option("--fg", "foreground", type=HexColor(), help="Hex encoded color for the video text")
@click.option(
    "--bg", "background", type=HexColor(), help="Hex encoded color for the video background"
)
@click.option("-w", "--width", type=click.IntRange(min=1), help="Width of the video in pixels")
@click.option("-h", "--height", type=click.IntRange(min=1), help="Height of the video in pixels")
@click.option("--tags", help="Comma separated list of tags to use in the YouTube upload")
@click.option("--client-secrets", help="OAuth2 client secrets JSON file")
@click.option("--ffmpeg", help="ffmpeg executable")
@click.option(
    "--download-audio/--stream-audio",
    default=None,
    help="Download the audio before encoding instead of letting ffmpeg stream it",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.version_option(__version__, prog_name="podcast-to-youtube")
def main(config_path: Path | None, **options: Any) -> None:
    """Publish podcast episodes as YouTube videos.

    Each selected episode becomes an unlisted video: a title slide with the
    podcast logo, looped over the episode audio.

    Example: podcast-to-youtube --rss https://example.com/feed.xml
    """
    try:
        config = load_config(local_path=config_path).with_overrides(**options)
    except ConfigError as e:
        fail(f"invalid configuration: {e}")

    run(config)


if __name__ == "__main__":
    main()
