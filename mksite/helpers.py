"""Slug and dateline helpers shared by the loader, renderer, and archive.

Example
-------
>>> from mksite.helpers import format_date, slugify
>>> slugify("Hello, World!")
'hello-world'
>>> format_date("2024-01-03", "abbr")
'Jan  3, 2024'
"""

from __future__ import annotations

import datetime as dt
import re
import typing as typ

from ._constants import MONTHS_ABBR, MONTHS_FULL, SLUG_MAX_LENGTH

DateStyle = typ.Literal["full", "abbr"]

ISO_DATE_PATTERN = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})\Z")
SLUG_SEPARATOR_PATTERN = re.compile(r"[^a-z0-9]+")

_MONTH_TABLES: dict[str, tuple[str, ...]] = {
    "full": MONTHS_FULL,
    "abbr": MONTHS_ABBR,
}
DATE_STYLES = tuple(_MONTH_TABLES)


class DateFormatError(ValueError):
    """Raised when a page date is not a valid ``YYYY-MM-DD`` value."""


def slugify(title: str, max_length: int = SLUG_MAX_LENGTH) -> str:
    """Convert ``title`` into a lowercase, hyphen-separated ASCII slug.

    Parameters
    ----------
    title : str
        Arbitrary page title.
    max_length : int, optional
        Upper bound on the slug length; defaults to ``SLUG_MAX_LENGTH``.

    Returns
    -------
    str
        Slug containing only ``[a-z0-9-]`` that neither starts nor ends with
        ``-``. Empty when ``title`` holds no ASCII alphanumerics.
    """
    lowered = title.lower()
    slug = SLUG_SEPARATOR_PATTERN.sub("-", lowered).strip("-")
    return slug[:max_length].rstrip("-")


def parse_iso_date(iso: str) -> dt.date:
    """Return the calendar date described by a strict ``YYYY-MM-DD`` string."""
    match = ISO_DATE_PATTERN.match(iso)
    if match is None:
        msg = f"Expected a YYYY-MM-DD date, got {iso!r}."
        raise DateFormatError(msg)
    year, month, day = (int(part) for part in match.groups())
    if not 1 <= month <= 12:
        msg = f"Month {month} is out of range in {iso!r}."
        raise DateFormatError(msg)
    try:
        return dt.date(year, month, day)
    except ValueError as exc:
        msg = f"Invalid calendar date {iso!r}: {exc}"
        raise DateFormatError(msg) from exc


def format_date(iso: str, style: DateStyle = "full") -> str:
    """Format an ISO date for datelines and archive rows.

    Parameters
    ----------
    iso : str
        Date string in ``YYYY-MM-DD`` form.
    style : {"full", "abbr"}, optional
        ``"full"`` yields ``"January  3, 2024"``; ``"abbr"`` yields
        ``"Jan  3, 2024"``.

    Returns
    -------
    str
        Month name, space-padded day, and four-digit year.

    Raises
    ------
    DateFormatError
        If ``iso`` is not a valid ``YYYY-MM-DD`` date.
    """
    date = parse_iso_date(iso)
    month_name = _MONTH_TABLES[style][date.month - 1]
    return f"{month_name} {date.day:2d}, {date.year:04d}"


__all__ = [
    "DATE_STYLES",
    "DateFormatError",
    "DateStyle",
    "format_date",
    "parse_iso_date",
    "slugify",
]
