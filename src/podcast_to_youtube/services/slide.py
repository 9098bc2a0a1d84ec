"""Title slide rendering.

A slide is a solid background with the podcast logo in the upper half and
the episode text centred underneath.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from PIL import Image, ImageDraw, ImageFont

from podcast_to_youtube.core.config import Color
from podcast_to_youtube.core.errors import SlideError

# Fractions of the slide size
LOGO_BOX = (0.8, 0.5)
TEXT_WIDTH = 0.9
MARGIN = 0.08
FONT_SIZE = 1 / 12
LINE_SPACING = 1.25


@dataclass(frozen=True)
class SlideParams:
    """Everything needed to draw one slide."""

    logo: str | Path
    text: str
    font: str | Path
    foreground: Color
    background: Color
    width: int
    height: int


def _load_font(path: str | Path, size: int) -> Any:
    try:
        return ImageFont.truetype(str(path), size)
    except OSError as e:
        raise SlideError(f"could not load font {path}: {e}") from e


def _load_logo(path: str | Path) -> Image.Image:
    try:
        with Image.open(path) as logo:
            return logo.convert("RGBA")
    except OSError as e:
        raise SlideError(f"could not open logo {path}: {e}") from e


def _fit(image: Image.Image, max_width: int, max_height: int) -> Image.Image:
    """Scale an image up or down to fit the box, keeping its aspect ratio."""
    ratio = min(max_width / image.width, max_height / image.height)
    size = (max(1, round(image.width * ratio)), max(1, round(image.height * ratio)))
    return image.resize(size, Image.Resampling.LANCZOS)


def wrap_text(text: str, draw: ImageDraw.ImageDraw, font: Any, max_width: float) -> list[str]:
    """Split text into lines no wider than max_width.

    A single word wider than max_width gets a line of its own.
    """
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and draw.textlength(candidate, font=font) > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


def render_slide(params: SlideParams) -> Image.Image:
    """Draw the slide described by params.

    Raises:
        SlideError: If the logo or the font cannot be loaded.
    """
    width, height = params.width, params.height
    slide = Image.new("RGBA", (width, height), params.background)

    logo = _fit(_load_logo(params.logo), int(width * LOGO_BOX[0]), int(height * LOGO_BOX[1]))
    top = int(height * MARGIN)
    slide.paste(logo, ((width - logo.width) // 2, top), logo)

    font = _load_font(params.font, max(1, int(height * FONT_SIZE)))
    draw = ImageDraw.Draw(slide)
    lines = wrap_text(params.text, draw, font, width * TEXT_WIDTH)

    _, upper, _, lower = draw.textbbox((0, 0), "Ag", font=font)
    line_height = int((lower - upper) * LINE_SPACING) or 1

    text_top = top + logo.height
    free = height - text_top - len(lines) * line_height
    y = text_top + max(0, free // 2)
    for line in lines:
        line_width = draw.textlength(line, font=font)
        draw.text(((width - line_width) / 2, y), line, font=font, fill=params.foreground)
        y += line_height

    return slide.convert("RGB")


def save_png(image: Image.Image, path: Path) -> Path:
    """Write image to path as PNG.

    Raises:
        SlideError: If the file cannot be written.
    """
    try:
        image.save(path, format="PNG")
    except OSError as e:
        raise SlideError(f"could not create {path}: {e}") from e
    return path
