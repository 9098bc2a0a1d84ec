"""Tests for configuration management."""

from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest
from hypothesis import given, settings, strategies as st

from podcast_to_youtube.core.config import (
    DEFAULT_FEED_URL,
    TEAL,
    WHITE,
    Config,
    load_config,
    parse_hex_color,
)
from podcast_to_youtube.core.errors import ConfigError


def write_config(path: Path, content: str) -> Path:
    """Helper to write a TOML config file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class TestParseHexColor:
    """Tests for parse_hex_color."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("ffffff", (255, 255, 255, 255)),
            ("#009688", (0, 150, 136, 255)),
            ("#fff", (255, 255, 255, 255)),
            ("00968880", (0, 150, 136, 128)),
            ("ABCDEF", (171, 205, 239, 255)),
        ],
    )
    def test_valid(self, value: str, expected: tuple[int, int, int, int]) -> None:
        assert parse_hex_color(value) == expected

    @pytest.mark.parametrize("value", ["", "#", "white", "12345", "#gggggg", "1234567"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(ConfigError, match="invalid hex color"):
            parse_hex_color(value)

    @settings(max_examples=100)
    @given(
        r=st.integers(0, 255),
        g=st.integers(0, 255),
        b=st.integers(0, 255),
    )
    def test_rgb_components(self, r: int, g: int, b: int) -> None:
        assert parse_hex_color(f"#{r:02x}{g:02x}{b:02x}") == (r, g, b, 255)


class TestConfig:
    """Tests for the Config object."""

    def test_defaults(self) -> None:
        config = Config()

        assert config.feed_url == DEFAULT_FEED_URL
        assert config.foreground == WHITE
        assert config.background == TEAL
        assert (config.width, config.height) == (1280, 720)
        assert config.extra_tags == ["podcast", "gcppodcast"]
        assert config.download_audio is False

    def test_is_immutable(self) -> None:
        config = Config()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.width = 10  # type: ignore[misc]

    def test_with_overrides_skips_none(self) -> None:
        config = Config().with_overrides(width=640, height=None, feed_url=None)

        assert config.width == 640
        assert config.height == 720
        assert config.feed_url == DEFAULT_FEED_URL

    def test_with_overrides_parses_colors(self) -> None:
        config = Config().with_overrides(foreground="#000000", background=(1, 2, 3, 4))

        assert config.foreground == (0, 0, 0, 255)
        assert config.background == (1, 2, 3, 4)

    def test_with_overrides_rejects_unknown_keys(self) -> None:
        with pytest.raises(ConfigError, match="unknown configuration keys"):
            Config().with_overrides(colour="red")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"width": 0},
            {"height": -1},
            {"width": "wide"},
            {"title_template": "{season}"},
            {"download_audio": "yes"},
            {"foreground": 123},
        ],
    )
    def test_invalid_values(self, overrides: dict) -> None:
        with pytest.raises(ConfigError):
            Config().with_overrides(**overrides)

    def test_extra_tags_drop_empty_items(self) -> None:
        assert Config(tags="a,,b,").extra_tags == ["a", "b"]
        assert Config(tags="").extra_tags == []


class TestLoadConfig:
    """Tests for load_config."""

    def test_missing_files_give_defaults(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "local", tmp_path / "global")

        assert config == Config()
        assert not (tmp_path / "local").exists()

    def test_global_file(self, tmp_path: Path) -> None:
        global_path = write_config(
            tmp_path / "global" / "config",
            '[feed]\nurl = "https://example.com/feed.xml"\n\n[slide]\nbackground = "#000000"\n',
        )

        config = load_config(tmp_path / "local" / "config", global_path)

        assert config.feed_url == "https://example.com/feed.xml"
        assert config.background == (0, 0, 0, 255)

    def test_local_file_wins(self, tmp_path: Path) -> None:
        global_path = write_config(
            tmp_path / "global" / "config",
            '[slide]\nwidth = 640\nheight = 480\n\n[video]\ntags = "global"\n',
        )
        local_path = write_config(
            tmp_path / "local" / "config",
            '[slide]\nwidth = 1920\n\n[encoder]\ndownload_audio = true\n',
        )

        config = load_config(local_path, global_path)

        assert config.width == 1920
        assert config.height == 480
        assert config.tags == "global"
        assert config.download_audio is True

    def test_invalid_toml(self, tmp_path: Path) -> None:
        local_path = write_config(tmp_path / "config", "[slide\nwidth = ")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(local_path, tmp_path / "global")

    def test_unknown_setting(self, tmp_path: Path) -> None:
        local_path = write_config(tmp_path / "config", "[slide]\ndepth = 3\n")

        with pytest.raises(ConfigError, match="unknown setting slide.depth"):
            load_config(local_path, tmp_path / "global")

    def test_section_must_be_table(self, tmp_path: Path) -> None:
        local_path = write_config(tmp_path / "config", 'slide = "big"\n')

        with pytest.raises(ConfigError, match="must be a table"):
            load_config(local_path, tmp_path / "global")

    def test_wrong_type(self, tmp_path: Path) -> None:
        local_path = write_config(tmp_path / "config", '[slide]\nwidth = "wide"\n')

        with pytest.raises(ConfigError, match="width must be an integer"):
            load_config(local_path, tmp_path / "global")
