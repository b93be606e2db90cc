"""Shared fixtures for mksite tests."""

from __future__ import annotations

import contextlib
import sys
import typing as typ

import pytest
from loguru import logger

if typ.TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def log_messages() -> typ.Iterator[list[str]]:
    """Capture loguru records as ``"LEVEL message"`` strings."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(
            f"{message.record['level'].name} {message.record['message']}"
        ),
        level="DEBUG",
    )
    yield messages
    with contextlib.suppress(ValueError):
        logger.remove(handler_id)


@pytest.fixture
def site_tree(tmp_path: Path) -> Path:
    """Create a minimal content tree with two posts, a page, and a favicon."""
    posts = tmp_path / "content" / "posts"
    posts.mkdir(parents=True)
    (posts / "first.txt").write_text(
        "title: First Post\ndate: 2024-01-03\n---\nHello **world**.\n",
        encoding="utf-8",
    )
    (posts / "second.txt").write_text(
        "title: Second Post!\ndate: 2024-03-15\n---\n"
        "## Intro\nA note^[with **bold**] and a margin^-[aside].\n",
        encoding="utf-8",
    )
    pages = tmp_path / "content" / "pages"
    pages.mkdir()
    (pages / "about.txt").write_text(
        "title: About\n---\nJust a page.\n", encoding="utf-8"
    )
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "favicon.svg").write_text("<svg/>", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_loguru() -> typ.Iterator[None]:
    """Restore the default loguru handler after tests that reconfigure it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
