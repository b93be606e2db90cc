"""Tests for the ``mksite`` command line interface."""

from __future__ import annotations

import typing as typ

from mksite import cli

if typ.TYPE_CHECKING:
    from pathlib import Path

    import pytest


def _dirs(root: Path) -> list[str]:
    return [
        "--content-dir",
        str(root / "content"),
        "--public-dir",
        str(root / "public"),
        "--assets-dir",
        str(root / "assets"),
        "--config",
        str(root / "site.yaml"),
    ]


def test_build_reports_written_paths(
    site_tree: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A successful build exits zero and lists each artifact."""
    assert cli.main(["build", *_dirs(site_tree)]) == 0
    out = capsys.readouterr().out
    assert "wrote " in out
    assert out.count("\n") == 5
    assert (site_tree / "public" / "index.html").exists()


def test_build_reads_config_file(site_tree: Path) -> None:
    """Directories may come from ``site.yaml`` instead of flags."""
    config = site_tree / "site.yaml"
    config.write_text(
        f"content_dir: {site_tree / 'content'}\n"
        f"public_dir: {site_tree / 'dist'}\n"
        f"assets_dir: {site_tree / 'assets'}\n",
        encoding="utf-8",
    )
    assert cli.main(["build", "--config", str(config)]) == 0
    assert (site_tree / "dist" / "posts" / "first-post.html").exists()


def test_build_fails_for_empty_directory(site_tree: Path) -> None:
    """An empty content directory makes the command exit non-zero."""
    (site_tree / "content" / "empty").mkdir()
    assert cli.main(["build", *_dirs(site_tree)]) == 1


def test_build_fails_without_content(tmp_path: Path) -> None:
    """A missing content tree makes the command exit non-zero."""
    assert cli.main(["build", *_dirs(tmp_path)]) == 1


def test_build_fails_for_bad_config(site_tree: Path) -> None:
    """Invalid configuration is reported as a failure."""
    (site_tree / "site.yaml").write_text("buffer_size: -1\n", encoding="utf-8")
    assert cli.main(["build", *_dirs(site_tree)]) == 1


def test_render_prints_document(
    site_tree: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``render`` writes one page to stdout."""
    source = site_tree / "content" / "posts" / "first.txt"
    status = cli.main(["render", str(source), "--config", str(site_tree / "site.yaml")])
    assert status == 0
    out = capsys.readouterr().out
    assert "<h1>First Post</h1>" in out
    assert "<p>Hello <strong>world</strong>.</p>" in out
