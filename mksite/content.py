r"""Load posts and their front matter from the content tree.

A post is a UTF-8 ``.txt`` file whose header lines carry ``title:`` and
``date:`` fields, terminated by a line containing exactly ``---``. Everything
after the terminator is the body handed to the block parser.

Example
-------
>>> from mksite.content import parse_page
>>> page = parse_page("title: Hello World\ndate: 2024-01-03\n---\nBody")
>>> (page.slug, page.date, page.body)
('hello-world', '2024-01-03', 'Body')
"""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from loguru import logger

from ._constants import FRONT_MATTER_TERMINATOR, SOURCE_SUFFIX
from .helpers import slugify


@dc.dataclass(slots=True)
class Page:
    """A post ready for rendering.

    Attributes
    ----------
    title : str
        Display title from the ``title:`` header.
    slug : str
        URL-safe identifier derived from the title.
    date : str
        ``YYYY-MM-DD`` date, or an empty string when absent.
    body : str
        Post body with ``\\n`` line terminators.
    source : Path or None
        File the page was read from, when loaded from disk.
    """

    title: str
    slug: str
    date: str = ""
    body: str = ""
    source: Path | None = None


def _header_value(line: str, key: str) -> str | None:
    """Return the value of ``key:`` on ``line`` with leading spaces trimmed."""
    prefix = f"{key}:"
    if not line.startswith(prefix):
        return None
    return line[len(prefix) :].lstrip(" ")


def parse_page(text: str, *, source: Path | None = None) -> Page:
    """Split raw post text into front matter and body.

    Parameters
    ----------
    text : str
        Full file contents.
    source : Path, optional
        Originating path; its stem is the fallback title, and its slug
        stands in when the title holds no ASCII alphanumerics.

    Returns
    -------
    Page
        The parsed page. When no ``---`` terminator is present every line is
        treated as front matter and the body is empty.
    """
    normalized = text.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")
    title = ""
    date = ""
    body = ""
    lines = normalized.split("\n")
    for index, line in enumerate(lines):
        if line == FRONT_MATTER_TERMINATOR:
            body = "\n".join(lines[index + 1 :])
            break
        if (value := _header_value(line, "title")) is not None:
            title = value
        elif (value := _header_value(line, "date")) is not None:
            date = value

    if not title and source is not None:
        title = source.stem
    slug = slugify(title)
    if not slug and source is not None:
        slug = slugify(source.stem)
    return Page(title=title, slug=slug, date=date, body=body, source=source)


def load_page(path: Path) -> Page:
    """Read and parse a single post file."""
    return parse_page(path.read_text(encoding="utf-8"), source=path)


def import_pages(directory: Path) -> list[Page]:
    """Load every ``.txt`` post directly inside ``directory``, ordered by filename.

    Raises
    ------
    FileNotFoundError
        If ``directory`` does not exist.
    """
    if not directory.is_dir():
        msg = f"Content directory '{directory}' not found."
        raise FileNotFoundError(msg)
    paths = sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix == SOURCE_SUFFIX
    )
    logger.info("Scanned {}: found {} pages", directory, len(paths))
    pages: list[Page] = []
    for path in paths:
        logger.info("Importing page: {}", path.name)
        pages.append(load_page(path))
    return pages


__all__ = ["Page", "import_pages", "load_page", "parse_page"]
