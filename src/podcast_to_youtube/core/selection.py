"""Episode range parsing and selection."""

from __future__ import annotations

import re
from collections.abc import Iterable

from podcast_to_youtube.core.errors import NoEpisodesSelectedError, RangeParseError
from podcast_to_youtube.core.models import Episode, EpisodeRange

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(part: str, text: str) -> int:
    if not _INTEGER_RE.fullmatch(part):
        raise RangeParseError(text)
    return int(part)


def parse_range(text: str) -> EpisodeRange:
    """Parse either a single episode number ``n`` or a range ``n-m``.

    No ordering is enforced between the two ends: ``5-2`` parses and
    simply contains no episode.

    Raises:
        RangeParseError: If the text is not in one of the two forms.
    """
    token = text.strip()
    parts = token.split("-")

    if len(parts) == 1:
        number = _parse_int(parts[0], text)
        return EpisodeRange(number, number)
    if len(parts) == 2:
        return EpisodeRange(_parse_int(parts[0], text), _parse_int(parts[1], text))

    raise RangeParseError(text)


def select_episodes(episodes: Iterable[Episode], episode_range: EpisodeRange) -> list[Episode]:
    """Return the episodes whose number lies in the range, in feed order.

    Raises:
        NoEpisodesSelectedError: If no episode is in the range.
    """
    selected = [episode for episode in episodes if episode_range.contains(episode.number)]
    if not selected:
        raise NoEpisodesSelectedError()
    return selected
