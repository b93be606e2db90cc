"""Tests for the site builder.

These tests build a small content tree in ``tmp_path`` and inspect the
written HTML with BeautifulSoup.
"""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup

from mksite.config import SiteConfig
from mksite.site import SiteBuildError, SiteBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path


def _config(root: Path, **overrides: typ.Any) -> SiteConfig:
    values: dict[str, typ.Any] = {
        "content_dir": root / "content",
        "public_dir": root / "public",
        "assets_dir": root / "assets",
    }
    values.update(overrides)
    return SiteConfig(**values)


def test_build_writes_pages_archive_and_favicon(site_tree: Path) -> None:
    """Every post, the archive index, and the favicon are written."""
    written = SiteBuilder(_config(site_tree)).run()
    public = site_tree / "public"
    assert set(written) == {
        public / "favicon.svg",
        public / "pages" / "about.html",
        public / "posts" / "first-post.html",
        public / "posts" / "second-post.html",
        public / "index.html",
    }
    assert (public / "favicon.svg").read_text(encoding="utf-8") == "<svg/>"


def test_post_html_contents(site_tree: Path) -> None:
    """Posts carry their dateline, sections, and notes."""
    SiteBuilder(_config(site_tree)).run()
    html = (site_tree / "public" / "posts" / "second-post.html").read_text(
        encoding="utf-8"
    )
    soup = BeautifulSoup(html, "html.parser")
    assert soup.h1.get_text() == "Second Post!"
    assert soup.select_one("p.subtitle").get_text() == "Mar 15, 2024"
    assert soup.select_one("section h2").get_text() == "Intro"
    assert soup.select_one("span.sidenote").decode_contents() == (
        "with <strong>bold</strong>"
    )
    assert soup.select_one("span.marginnote").get_text() == "aside"
    assert [tag.get("id") for tag in soup.select("input.margin-toggle")] == [
        "sn-1",
        "mn-2",
    ]


def test_archive_is_sorted_newest_first(site_tree: Path) -> None:
    """The archive lists posts by descending date."""
    SiteBuilder(_config(site_tree)).run()
    html = (site_tree / "public" / "index.html").read_text(encoding="utf-8")
    soup = BeautifulSoup(html, "html.parser")
    hrefs = [a.get("href") for a in soup.select("table.archive td.title a")]
    assert hrefs == ["posts/second-post.html", "posts/first-post.html"]


def test_non_archive_directories_do_not_write_index(site_tree: Path) -> None:
    """Only the archive directory produces ``index.html``."""
    config = _config(site_tree, archive_dir="journal")
    SiteBuilder(config).run()
    assert not (site_tree / "public" / "index.html").exists()


def test_missing_content_directory(tmp_path: Path) -> None:
    """Builds fail when there is no content directory."""
    with pytest.raises(SiteBuildError, match="content directory"):
        SiteBuilder(_config(tmp_path)).run()


def test_missing_favicon(site_tree: Path) -> None:
    """Builds fail when the favicon cannot be copied."""
    (site_tree / "assets" / "favicon.svg").unlink()
    with pytest.raises(SiteBuildError, match="favicon"):
        SiteBuilder(_config(site_tree)).run()


def test_empty_content_directory(site_tree: Path) -> None:
    """A content directory without posts fails the build."""
    (site_tree / "content" / "drafts").mkdir()
    with pytest.raises(SiteBuildError, match="drafts"):
        SiteBuilder(_config(site_tree)).run()


def test_custom_stylesheet_is_inlined(site_tree: Path) -> None:
    """A configured stylesheet replaces the packaged one."""
    css = site_tree / "assets" / "custom.css"
    css.write_text("article { margin: 0; }", encoding="utf-8")
    SiteBuilder(_config(site_tree, stylesheet=css)).run()
    html = (site_tree / "public" / "pages" / "about.html").read_text(encoding="utf-8")
    assert "<style>article { margin: 0; }</style>" in html
