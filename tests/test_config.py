"""Unit tests for the YAML site configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from mksite.config import SiteConfig, SiteConfigError, load_site_config


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(text.strip() + "\n", encoding="utf-8")
    return path


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    """Builds work without a config file."""
    assert load_site_config(tmp_path / "site.yaml") == SiteConfig()
    assert load_site_config(None) == SiteConfig()


def test_values_are_typed(tmp_path: Path) -> None:
    """Directory keys become paths and numbers are validated."""
    path = _write(
        tmp_path,
        """
content_dir: src/content
public_dir: dist
archive_dir: journal
stylesheet: theme.css
archive_title: Archive
buffer_size: 1024
dateline_style: full
""",
    )
    config = load_site_config(path)
    assert config.content_dir == Path("src/content")
    assert config.public_dir == Path("dist")
    assert config.archive_dir == "journal"
    assert config.stylesheet == Path("theme.css")
    assert config.archive_title == "Archive"
    assert config.buffer_size == 1024
    assert config.dateline_style == "full"
    assert config.favicon_path == Path("assets/favicon.svg")


def test_overrides_take_precedence(tmp_path: Path) -> None:
    """Non-None overrides replace file values; None overrides are ignored."""
    path = _write(tmp_path, "public_dir: dist\ncontent_dir: words")
    config = load_site_config(path, public_dir=tmp_path / "out", content_dir=None)
    assert config.public_dir == tmp_path / "out"
    assert config.content_dir == Path("words")


@pytest.mark.parametrize(
    "text",
    [
        "- just\n- a list",
        "buffer_size: 0",
        "buffer_size: many",
        "buffer_size: true",
        "dateline_style: long",
        "unknown_key: 1",
        "content_dir: [unclosed",
    ],
)
def test_invalid_config_raises(tmp_path: Path, text: str) -> None:
    """Malformed or out-of-range configuration raises SiteConfigError."""
    path = _write(tmp_path, text)
    with pytest.raises(SiteConfigError):
        load_site_config(path)


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    """An empty YAML document is treated as an empty mapping."""
    path = tmp_path / "site.yaml"
    path.write_text("", encoding="utf-8")
    assert load_site_config(path) == SiteConfig()
