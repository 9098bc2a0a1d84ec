"""CLI output formatting utilities."""

from rich.console import Console
from rich.table import Table

from podcast_to_youtube.core.models import Episode, UploadResult


def display_selected(episodes: list[Episode], console: Console) -> None:
    """Display the episodes selected for publishing in a table."""
    table = Table(title="Selected episodes")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Title", style="bold")
    table.add_column("Audio", style="cyan", no_wrap=True, overflow="ellipsis")

    for episode in episodes:
        table.add_row(str(episode.number), episode.title, episode.audio_url or "-")

    console.print(table)


def display_upload(result: UploadResult, console: Console) -> None:
    """Report a finished upload."""
    video_id = result.video_id or "unknown id"
    console.print(f"[green]episode {result.episode.number} uploaded:[/green] {video_id}")
