"""Load and validate the YAML configuration for mksite builds.

This subpackage reads the optional ``site.yaml`` file, merges CLI overrides,
and produces a :class:`SiteConfig` that the site builder consumes. The
primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from mksite.config import load_site_config
>>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> config.public_dir  # doctest: +SKIP
PosixPath('public')
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError

__all__ = ["SiteConfig", "SiteConfigError", "load_site_config"]
