"""Configuration management for podcast-to-youtube.

Settings come from, lowest to highest priority: built-in defaults, the
global TOML config file, the local TOML config file, and command-line
options. The result is a single immutable Config passed to every component.
"""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from podcast_to_youtube.core.errors import ConfigError
from podcast_to_youtube.core.metadata import validate_title_template

# Configuration file paths
LOCAL_CONFIG_PATH = Path(".podcast-to-youtube/config")
GLOBAL_CONFIG_PATH = Path.home() / ".podcast-to-youtube" / "config"

DEFAULT_FEED_URL = "http://feeds.feedburner.com/GcpPodcast?format=xml"
DEFAULT_TITLE_TEMPLATE = "{title}: GCPPodcast {number}"

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
TEAL: Color = (0, 150, 136, 255)

_HEX_COLOR_RE = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")

# Maps "section.key" in the TOML file to Config field names
_FILE_KEYS: dict[str, str] = {
    "feed.url": "feed_url",
    "slide.logo": "logo",
    "slide.font": "font",
    "slide.foreground": "foreground",
    "slide.background": "background",
    "slide.width": "width",
    "slide.height": "height",
    "video.title_template": "title_template",
    "video.tags": "tags",
    "auth.client_secrets": "client_secrets",
    "encoder.ffmpeg": "ffmpeg",
    "encoder.download_audio": "download_audio",
}


def parse_hex_color(value: str) -> Color:
    """Parse a hex encoded colour into an RGBA tuple.

    Accepts ``rgb``, ``rrggbb`` and ``rrggbbaa``, with or without a
    leading ``#``.

    Raises:
        ConfigError: If the value is not a hex colour.
    """
    match = _HEX_COLOR_RE.fullmatch(value.strip())
    if not match:
        raise ConfigError(f"invalid hex color '{value}'")

    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) == 6:
        digits += "ff"

    r, g, b, a = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
    return (r, g, b, a)


@dataclass(frozen=True)
class Config:
    """Immutable run configuration."""

    feed_url: str = DEFAULT_FEED_URL
    logo: str = "resources/logo.png"
    font: str = "resources/Roboto-Light.ttf"
    title_template: str = DEFAULT_TITLE_TEMPLATE
    foreground: Color = WHITE
    background: Color = TEAL
    width: int = 1280
    height: int = 720
    tags: str = "podcast,gcppodcast"
    client_secrets: str = "client_secrets.json"
    ffmpeg: str = "ffmpeg"
    download_audio: bool = False

    @property
    def extra_tags(self) -> list[str]:
        """Return the comma separated extra tags as a list."""
        return [tag for tag in self.tags.split(",") if tag]

    def with_overrides(self, **overrides: Any) -> Config:
        """Return a copy with every non-None override applied.

        Raises:
            ConfigError: If the resulting configuration is invalid.
        """
        values = {key: value for key, value in overrides.items() if value is not None}
        unknown = set(values) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigError(f"unknown configuration keys: {', '.join(sorted(unknown))}")

        for key in ("foreground", "background"):
            if isinstance(values.get(key), str):
                values[key] = parse_hex_color(values[key])

        config = replace(self, **values)
        _validate(config)
        return config


def _validate(config: Config) -> None:
    """Validate configuration values.

    Raises:
        ConfigError: If a value is out of range or has the wrong type.
    """
    for key in ("width", "height"):
        value = getattr(config, key)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{key} must be an integer, got {type(value).__name__}")
        if value <= 0:
            raise ConfigError(f"{key} must be positive, got {value}")

    for key in ("feed_url", "logo", "font", "title_template", "tags", "client_secrets", "ffmpeg"):
        value = getattr(config, key)
        if not isinstance(value, str):
            raise ConfigError(f"{key} must be a string, got {type(value).__name__}")

    for key in ("foreground", "background"):
        value = getattr(config, key)
        if not (isinstance(value, tuple) and len(value) == 4):
            raise ConfigError(f"{key} must be a hex color string, got {value!r}")

    if not isinstance(config.download_audio, bool):
        raise ConfigError(
            f"download_audio must be a boolean, got {type(config.download_audio).__name__}"
        )

    try:
        validate_title_template(config.title_template)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load and parse a TOML configuration file.

    Returns an empty dict if the file does not exist.

    Raises:
        ConfigError: If the file exists but cannot be parsed.
    """
    if not path.exists():
        return {}

    try:
        return tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"could not read config file {path}: {e}") from e


def _flatten(config_dict: dict[str, Any], path: Path) -> dict[str, Any]:
    """Map a parsed config file onto Config field names."""
    values: dict[str, Any] = {}
    for section, entries in config_dict.items():
        if not isinstance(entries, dict):
            raise ConfigError(f"[{section}] in {path} must be a table")
        for key, value in entries.items():
            name = _FILE_KEYS.get(f"{section}.{key}")
            if name is None:
                raise ConfigError(f"unknown setting {section}.{key} in {path}")
            values[name] = value
    return values


def load_config(
    local_path: Path | None = None,
    global_path: Path | None = None,
) -> Config:
    """Load configuration from local and global config files.

    Values from the local file win over the global file, which wins over
    the defaults. Missing files are skipped; nothing is created on disk.

    Args:
        local_path: Override path for local config file.
        global_path: Override path for global config file.

    Returns:
        Config object with merged configuration values.

    Raises:
        ConfigError: If configuration files are invalid.
    """
    local_path = local_path or LOCAL_CONFIG_PATH
    global_path = global_path or GLOBAL_CONFIG_PATH

    merged: dict[str, Any] = {}
    merged.update(_flatten(_load_toml_file(global_path), global_path))
    merged.update(_flatten(_load_toml_file(local_path), local_path))

    return Config().with_overrides(**merged)
