"""Cyclopts CLI entrypoint for building the static site.

The ``mksite`` console script defined here renders every post under
``content/<dir>/*.txt`` into ``public/<dir>/<slug>.html``, writes the archive
index for the posts directory, and copies the favicon. ``mksite render``
prints a single page to stdout, which is handy when drafting a post.

Examples
--------
Build the site from the current directory:

>>> from mksite.cli import main
>>> main(["build"])  # doctest: +SKIP
0

Preview one post:

>>> from mksite.cli import app
>>> app(["render", "content/posts/hello.txt"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from loguru import logger

from .config import SiteConfigError, load_site_config
from .content import load_page
from .document import DocumentAssembler, load_stylesheet
from .site import SiteBuildError, SiteBuilder

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_CONFIG = Path("site.yaml")
LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

app = App(name="mksite", config=cyclopts.config.Env("MKSITE_", command=False))  # type: ignore[unknown-argument]


def configure_logging(*, verbose: bool = False) -> None:
    """Send loguru output to stderr, at DEBUG when ``verbose`` else INFO."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level="DEBUG" if verbose else "INFO")


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render every content directory into the public directory.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the optional site config")
    ] = DEFAULT_CONFIG,
    content_dir: typ.Annotated[
        Path | None, Parameter(help="Override the content folder")
    ] = None,
    public_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    assets_dir: typ.Annotated[
        Path | None, Parameter(help="Override the assets folder")
    ] = None,
) -> None:
    """Build the site described by ``config`` and the directory overrides.

    Parameters
    ----------
    config : Path, optional
        ``site.yaml`` to load; defaults apply when the file is absent.
    content_dir : Path or None, optional
        Overrides ``content_dir`` from the config.
    public_dir : Path or None, optional
        Overrides ``public_dir`` from the config.
    assets_dir : Path or None, optional
        Overrides ``assets_dir`` from the config.

    Returns
    -------
    None
        Writes the rendered artifacts and prints each generated path.

    Raises
    ------
    SiteConfigError
        If the configuration file is invalid.
    SiteBuildError
        If the content tree is missing, empty, or lacks a favicon.
    """
    site_config = load_site_config(
        config,
        content_dir=content_dir,
        public_dir=public_dir,
        assets_dir=assets_dir,
    )
    for path in SiteBuilder(site_config).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the HTML for a single post to stdout.")
def render(
    path: typ.Annotated[Path, Parameter(help="Post source file")],
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the optional site config")
    ] = DEFAULT_CONFIG,
) -> None:
    """Render ``path`` with the configured stylesheet and print the document."""
    site_config = load_site_config(config)
    assembler = DocumentAssembler(
        load_stylesheet(site_config.stylesheet),
        buffer_size=site_config.buffer_size,
        dateline_style=site_config.dateline_style,
    )
    sys.stdout.write(assembler.render_page(load_page(path)))


def main(argv: cabc.Sequence[str] | None = None) -> int:
    """Run the ``mksite`` command and translate failures into an exit status.

    Parameters
    ----------
    argv : Sequence[str] or None, optional
        Arguments to parse; ``None`` reads ``sys.argv``.

    Returns
    -------
    int
        ``0`` on success, ``1`` when the build fails.
    """
    configure_logging()
    try:
        app(argv)
    except (SiteBuildError, SiteConfigError, OSError) as exc:
        logger.error("{}", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    raise SystemExit(main())
