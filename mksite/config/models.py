"""Typed dataclasses describing mksite build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from mksite._constants import (
    ARCHIVE_DIR,
    ARCHIVE_HEADING,
    ARCHIVE_TITLE,
    ASSET_DIR,
    CONTENT_DIR,
    FAVICON_NAME,
    PUBLIC_DIR,
    SCRATCH_BUFFER_SIZE,
)
from mksite.helpers import DateStyle


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteConfig:
    """Directories, labels, and limits used for a site build.

    Attributes
    ----------
    content_dir : Path
        Root holding one subdirectory of ``.txt`` posts per section.
    public_dir : Path
        Output root for rendered HTML and copied assets.
    assets_dir : Path
        Directory holding the favicon and optional stylesheet override.
    archive_dir : str
        Content subdirectory whose pages feed ``index.html``.
    stylesheet : Path or None
        CSS file inlined into every page; ``None`` uses the packaged sheet.
    favicon : str
        Favicon filename inside ``assets_dir``.
    archive_title : str
        ``<title>`` of the archive page.
    archive_heading : str
        ``<h1>`` of the archive page.
    buffer_size : int
        Scratch buffer bound, in bytes, for paragraphs and code blocks.
    dateline_style : {"abbr", "full"}
        Month style of the dateline under each post title.
    """

    content_dir: Path = Path(CONTENT_DIR)
    public_dir: Path = Path(PUBLIC_DIR)
    assets_dir: Path = Path(ASSET_DIR)
    archive_dir: str = ARCHIVE_DIR
    stylesheet: Path | None = None
    favicon: str = FAVICON_NAME
    archive_title: str = ARCHIVE_TITLE
    archive_heading: str = ARCHIVE_HEADING
    buffer_size: int = SCRATCH_BUFFER_SIZE
    dateline_style: DateStyle = "abbr"

    @property
    def favicon_path(self) -> Path:
        """Return the source path of the favicon."""
        return self.assets_dir / self.favicon


__all__ = ["SiteConfig", "SiteConfigError"]
