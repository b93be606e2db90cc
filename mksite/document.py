"""Wrap parsed post bodies and the post archive in the fixed HTML shell.

:class:`DocumentAssembler` owns the Jinja environment for the page and archive
templates. Each call to :meth:`DocumentAssembler.render_page` parses the body
with a fresh :class:`~mksite.markup.state.ParseState`, so note ids restart at
one for every page and nothing leaks between pages.

Example
-------
>>> from mksite.content import Page
>>> from mksite.document import DocumentAssembler
>>> assembler = DocumentAssembler(stylesheet="")
>>> html = assembler.render_page(Page(title="Hello", slug="hello"))
>>> "<h1>Hello</h1>" in html
True
"""

from __future__ import annotations

import dataclasses as dc
import io
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger
from markupsafe import Markup

from ._constants import (
    ARCHIVE_DIR,
    ARCHIVE_HEADING,
    ARCHIVE_TITLE,
    PAGE_FILENAME_TEMPLATE,
    SCRATCH_BUFFER_SIZE,
)
from .helpers import DateFormatError, DateStyle, format_date
from .markup import BlockParser

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .content import Page

DEFAULT_STYLESHEET = Path(__file__).parent / "assets" / "styles.css"


@dc.dataclass(frozen=True, slots=True)
class ArchiveRow:
    """One row of the archive table."""

    date: str
    title: str
    href: str


def load_stylesheet(path: Path | None = None) -> str:
    """Return the CSS inlined into every page.

    ``None`` selects the stylesheet bundled with the package. A configured path
    that does not exist is logged and replaced by an empty stylesheet.
    """
    target = path or DEFAULT_STYLESHEET
    if not target.is_file():
        logger.warning("Stylesheet {} not found; pages will be unstyled", target)
        return ""
    return target.read_text(encoding="utf-8")


def sort_pages(pages: cabc.Iterable[Page]) -> list[Page]:
    """Return ``pages`` ordered newest first by ISO date; undated pages go last."""
    return sorted(pages, key=lambda page: page.date, reverse=True)


def format_page_date(page: Page, style: DateStyle) -> str:
    """Format ``page.date``, logging and returning ``""`` when it is invalid."""
    if not page.date:
        return ""
    try:
        return format_date(page.date, style)
    except DateFormatError:
        logger.warning("Invalid date format in page {}: {}", page.slug, page.date)
        return ""


class DocumentAssembler:
    """Render complete post documents and the archive index."""

    def __init__(
        self,
        stylesheet: str,
        *,
        templates_dir: Path | None = None,
        buffer_size: int = SCRATCH_BUFFER_SIZE,
        dateline_style: DateStyle = "abbr",
        archive_title: str = ARCHIVE_TITLE,
        archive_heading: str = ARCHIVE_HEADING,
        archive_dir: str = ARCHIVE_DIR,
    ) -> None:
        """Initialize the assembler and its Jinja environment.

        Parameters
        ----------
        stylesheet : str
            CSS inlined verbatim into each document head.
        templates_dir : Path, optional
            Directory containing ``page.jinja`` and ``archive.jinja``;
            defaults to the package templates.
        buffer_size : int, optional
            Scratch buffer bound passed to the block parser.
        dateline_style : {"abbr", "full"}, optional
            Month style used for the dateline under the post title.
        archive_title : str, optional
            ``<title>`` of the archive page.
        archive_heading : str, optional
            ``<h1>`` of the archive page.
        archive_dir : str, optional
            Directory segment prefixed to archive links.
        """
        self.stylesheet = Markup(stylesheet)
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.parser = BlockParser(buffer_size=buffer_size)
        self.dateline_style: DateStyle = dateline_style
        self.archive_title = archive_title
        self.archive_heading = archive_heading
        self.archive_dir = archive_dir
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.page_template = self.env.get_template("page.jinja")
        self.archive_template = self.env.get_template("archive.jinja")

    def render_body(self, body: str) -> str:
        """Parse ``body`` with fresh state and return its HTML."""
        sink = io.StringIO()
        self.parser.render(body, sink)
        return sink.getvalue()

    def render_page(self, page: Page) -> str:
        """Return the full HTML document for ``page``."""
        context = {
            "title": Markup(page.title),
            "stylesheet": self.stylesheet,
            "dateline": format_page_date(page, self.dateline_style),
            "body": Markup(self.render_body(page.body)),
        }
        return self.page_template.render(**context)

    def render_archive(self, pages: cabc.Sequence[Page]) -> str:
        """Return the archive document listing ``pages`` in the given order."""
        rows = [
            ArchiveRow(
                date=format_page_date(page, "abbr"),
                title=Markup(page.title),
                href=f"{self.archive_dir}/{PAGE_FILENAME_TEMPLATE.format(slug=page.slug)}",
            )
            for page in pages
        ]
        context = {
            "title": Markup(self.archive_title),
            "stylesheet": self.stylesheet,
            "heading": self.archive_heading,
            "rows": rows,
        }
        return self.archive_template.render(**context)


__all__ = [
    "ArchiveRow",
    "DEFAULT_STYLESHEET",
    "DocumentAssembler",
    "format_page_date",
    "load_stylesheet",
    "sort_pages",
]
