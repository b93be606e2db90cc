"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from mksite.helpers import DATE_STYLES

from .models import SiteConfig, SiteConfigError

_PATH_KEYS = ("content_dir", "public_dir", "assets_dir")
_TEXT_KEYS = ("archive_dir", "favicon", "archive_title", "archive_heading")


def load_site_config(
    path: Path | None, **overrides: Path | str | int | None
) -> SiteConfig:
    """Load the YAML build configuration, falling back to defaults.

    Parameters
    ----------
    path : Path or None
        Location of ``site.yaml``. A missing file (or ``None``) yields the
        default configuration.
    **overrides
        Field values that take precedence over the file, typically CLI
        flags. ``None`` values are ignored.

    Returns
    -------
    SiteConfig
        Resolved configuration.

    Raises
    ------
    SiteConfigError
        If the YAML cannot be parsed, the top level is not a mapping, a key is
        unknown, or ``buffer_size`` is not a positive integer.

    Examples
    --------
    >>> from mksite.config import load_site_config
    >>> load_site_config(None).archive_dir
    'posts'
    """
    raw: dict[str, typ.Any] = {}
    if path is not None and path.exists():
        raw = _read_yaml(path)
    raw.update({key: value for key, value in overrides.items() if value is not None})
    return _build_site_config(raw)


def _read_yaml(path: Path) -> dict[str, typ.Any]:
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Could not parse configuration file '{path}': {exc}"
        raise SiteConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise SiteConfigError(msg)
    return dict(loaded)


def _build_site_config(raw: typ.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a SiteConfig from a merged mapping of file values and overrides."""
    known = {field.name for field in dc.fields(SiteConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        msg = f"Unknown configuration keys: {', '.join(unknown)}."
        raise SiteConfigError(msg)

    values: dict[str, typ.Any] = {}
    for key in _PATH_KEYS:
        if key in raw:
            values[key] = Path(raw[key])
    for key in _TEXT_KEYS:
        if key in raw:
            values[key] = str(raw[key])
    if raw.get("stylesheet") is not None:
        values["stylesheet"] = Path(raw["stylesheet"])
    if "buffer_size" in raw:
        values["buffer_size"] = _positive_int(raw["buffer_size"])
    if "dateline_style" in raw:
        style = str(raw["dateline_style"])
        if style not in DATE_STYLES:
            msg = f"dateline_style must be one of {', '.join(DATE_STYLES)}, got {style!r}."
            raise SiteConfigError(msg)
        values["dateline_style"] = style
    return SiteConfig(**values)


def _positive_int(value: object) -> int:
    match value:
        case bool():
            pass
        case int() if value > 0:
            return value
        case str() if value.strip().isdigit() and int(value) > 0:
            return int(value)
    msg = f"buffer_size must be a positive integer, got {value!r}."
    raise SiteConfigError(msg)


__all__ = ["load_site_config"]
