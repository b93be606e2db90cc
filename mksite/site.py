"""Walk the content tree and write the rendered site.

:class:`SiteBuilder` mirrors the layout of ``content/``: every subdirectory
``content/<dir>/*.txt`` becomes ``public/<dir>/<slug>.html``. The archive
directory (``posts`` by default) additionally produces ``public/index.html``
sorted newest first. The favicon is copied from ``assets/`` into the public
root.

Example
-------
>>> from mksite.config import SiteConfig
>>> from mksite.site import SiteBuilder
>>> written = SiteBuilder(SiteConfig()).run()  # doctest: +SKIP
>>> written[-1]  # doctest: +SKIP
PosixPath('public/index.html')
"""

from __future__ import annotations

import shutil
import time
import typing as typ

from loguru import logger

from ._constants import INDEX_NAME, PAGE_FILENAME_TEMPLATE
from .content import import_pages
from .document import DocumentAssembler, load_stylesheet, sort_pages

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig
    from .content import Page


class SiteBuildError(RuntimeError):
    """Raised when the content tree cannot be turned into a site."""


class SiteBuilder:
    """Render every content directory into the public directory."""

    def __init__(
        self, config: SiteConfig, *, assembler: DocumentAssembler | None = None
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : SiteConfig
            Resolved build configuration.
        assembler : DocumentAssembler, optional
            Pre-built assembler; by default one is created from ``config``.
        """
        self.config = config
        self.assembler = assembler or DocumentAssembler(
            load_stylesheet(config.stylesheet),
            buffer_size=config.buffer_size,
            dateline_style=config.dateline_style,
            archive_title=config.archive_title,
            archive_heading=config.archive_heading,
            archive_dir=config.archive_dir,
        )

    def run(self) -> list[Path]:
        """Build the site and return every written path.

        Raises
        ------
        SiteBuildError
            If the content directory or favicon is missing, or a content
            directory holds no pages.
        OSError
            If reading sources or writing outputs fails.
        """
        started = time.perf_counter()
        content_dir = self.config.content_dir
        if not content_dir.is_dir():
            msg = f"Failed to open content directory: {content_dir}"
            raise SiteBuildError(msg)

        self.config.public_dir.mkdir(parents=True, exist_ok=True)
        written = [self.install_favicon()]
        for source_dir in sorted(p for p in content_dir.iterdir() if p.is_dir()):
            written.extend(self.build_directory(source_dir))

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("Site built in {:.3f} ms", elapsed_ms)
        return written

    def build_directory(self, source_dir: Path) -> list[Path]:
        """Render one content directory, plus the archive when it is the posts dir."""
        pages = import_pages(source_dir)
        if not pages:
            msg = f"Failed to import pages from {source_dir}"
            raise SiteBuildError(msg)

        out_dir = self.config.public_dir / source_dir.name
        written = self.write_pages(out_dir, pages)
        if source_dir.name == self.config.archive_dir:
            written.append(self.write_archive(pages))
        return written

    def write_pages(self, out_dir: Path, pages: list[Page]) -> list[Path]:
        """Write each page to ``out_dir/<slug>.html``."""
        out_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for page in pages:
            output_path = out_dir / PAGE_FILENAME_TEMPLATE.format(slug=page.slug)
            html = self.assembler.render_page(page)
            output_path.write_text(html, encoding="utf-8")
            written.append(output_path)
        return written

    def write_archive(self, pages: list[Page]) -> Path:
        """Write the archive index for ``pages`` sorted by descending date."""
        output_path = self.config.public_dir / INDEX_NAME
        html = self.assembler.render_archive(sort_pages(pages))
        output_path.write_text(html, encoding="utf-8")
        return output_path

    def install_favicon(self) -> Path:
        """Copy the favicon into the public root and return its new path."""
        source = self.config.favicon_path
        if not source.is_file():
            msg = f"Failed to open favicon source: {source}"
            raise SiteBuildError(msg)
        destination = self.config.public_dir / source.name
        shutil.copyfile(source, destination)
        return destination


__all__ = ["SiteBuildError", "SiteBuilder"]
