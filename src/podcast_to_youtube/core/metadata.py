"""Video metadata construction.

Turns an Episode into the title, description and tags of its video.
"""

from __future__ import annotations

import string
from dataclasses import asdict, fields

from podcast_to_youtube.core.errors import TemplateError
from podcast_to_youtube.core.models import Episode, VideoMetadata
from podcast_to_youtube.utils.text import flatten_newlines, strip_html

# Fields a title template may reference
TEMPLATE_FIELDS = frozenset(f.name for f in fields(Episode))

_SAMPLE_EPISODE = Episode(title="Title", number=1, link="http://example.com/1")


def _field_names(template: str) -> list[str]:
    """Return every replacement field of a template, including nested ones."""
    names: list[str] = []
    for _, field_name, format_spec, _ in string.Formatter().parse(template):
        if field_name is None:
            continue
        names.append(field_name)
        if format_spec:
            names.extend(_field_names(format_spec))
    return names


def validate_title_template(template: str) -> None:
    """Check that a title template only uses bare episode fields.

    Attribute and index lookups such as ``{title.upper}`` are rejected.

    Raises:
        ValueError: If the template is malformed or names an unknown field.
    """
    try:
        names = _field_names(template)
    except ValueError as e:
        raise ValueError(f"invalid title template '{template}': {e}") from e

    for field_name in names:
        if field_name not in TEMPLATE_FIELDS:
            raise ValueError(
                f"invalid title template '{template}': unknown field '{field_name}' "
                f"(valid fields: {', '.join(sorted(TEMPLATE_FIELDS))})"
            )

    try:
        render_title(template, _SAMPLE_EPISODE)
    except TemplateError as e:
        raise ValueError(f"invalid title template '{template}': {e}") from e


def render_title(template: str, episode: Episode) -> str:
    """Render a title template such as ``"{title}: Podcast {number}"``.

    Raises:
        TemplateError: If the template cannot be rendered for the episode.
    """
    try:
        names = _field_names(template)
    except ValueError as e:
        raise TemplateError(f"ValueError: {e}") from e

    for field_name in names:
        if field_name not in TEMPLATE_FIELDS:
            raise TemplateError(f"unknown field '{field_name}'")

    try:
        return template.format(**asdict(episode))
    except (KeyError, IndexError, AttributeError, ValueError) as e:
        raise TemplateError(f"{type(e).__name__}: {e}") from e


def sanitize_description(description: str) -> str:
    """Strip all markup from a description and flatten its line breaks."""
    return flatten_newlines(strip_html(description))


def build_description(link: str, sanitized: str) -> str:
    """Prefix a sanitized description with the episode's original post."""
    return f"Original post: {link}\n\n" + sanitized


def build_metadata(episode: Episode, title: str, extra_tags: list[str]) -> VideoMetadata:
    """Build the metadata for an episode's video.

    Tags are the episode's feed categories followed by the extra tags.
    Visibility is always unlisted.
    """
    return VideoMetadata(
        title=title,
        description=build_description(episode.link, sanitize_description(episode.description)),
        tags=[*episode.tags, *extra_tags],
    )
