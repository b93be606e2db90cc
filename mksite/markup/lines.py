"""Classify body lines into block kinds for the block parser."""

from __future__ import annotations

import dataclasses as dc
import enum

FENCE_MARKER = "```"
MAX_HEADING_LEVEL = 6


class LineKind(enum.Enum):
    """Block-level kind assigned to a single body line."""

    BLANK = "blank"
    FENCE = "fence"
    HEADING = "heading"
    UNORDERED_ITEM = "unordered_item"
    ORDERED_ITEM = "ordered_item"
    PARAGRAPH = "paragraph"


@dc.dataclass(frozen=True, slots=True)
class Line:
    """A classified line and the offset where its inline text begins.

    Attributes
    ----------
    text : str
        The line without its trailing newline.
    kind : LineKind
        Block kind recognised for the line.
    level : int
        Heading level (1-6) for headings, ``0`` otherwise.
    offset : int
        Index of the first character after the block marker.
    """

    text: str
    kind: LineKind
    level: int = 0
    offset: int = 0

    @property
    def body(self) -> str:
        """Return the text following the block marker."""
        return self.text[self.offset :]


def is_blank(text: str) -> bool:
    """Return True when ``text`` is empty or only ASCII spaces and tabs."""
    return not text.strip(" \t")


def is_fence(text: str) -> bool:
    """Return True for lines opening or closing a fenced code block."""
    return text.startswith(FENCE_MARKER)


def heading_level(text: str) -> int:
    """Return the heading level of ``text``, or ``0`` when it is not a heading.

    A heading is one to six ``#`` characters followed by a single space and at
    least one further character; ``"## "`` on its own is not a heading.
    """
    level = len(text) - len(text.lstrip("#"))
    if not 1 <= level <= MAX_HEADING_LEVEL:
        return 0
    if len(text) <= level + 1 or text[level] != " ":
        return 0
    return level


def is_unordered_item(text: str) -> bool:
    """Return True for ``- item`` lines."""
    return text.startswith("- ")


def ordered_item_digits(text: str) -> int:
    """Return the digit count of an ``N. item`` marker, or ``0`` if absent."""
    digits = 0
    while digits < len(text) and text[digits] in "0123456789":
        digits += 1
    if digits == 0 or text[digits : digits + 2] != ". ":
        return 0
    return digits


def classify_line(text: str) -> Line:
    """Classify ``text`` into exactly one :class:`LineKind`.

    Kinds are tested in priority order: blank, fence, heading, unordered
    item, ordered item, and finally paragraph text.
    """
    if is_blank(text):
        return Line(text, LineKind.BLANK)
    if is_fence(text):
        return Line(text, LineKind.FENCE)
    level = heading_level(text)
    if level:
        return Line(text, LineKind.HEADING, level=level, offset=level + 1)
    if is_unordered_item(text):
        return Line(text, LineKind.UNORDERED_ITEM, offset=2)
    digits = ordered_item_digits(text)
    if digits:
        return Line(text, LineKind.ORDERED_ITEM, offset=digits + 2)
    return Line(text, LineKind.PARAGRAPH)


__all__ = [
    "FENCE_MARKER",
    "Line",
    "LineKind",
    "classify_line",
    "heading_level",
    "is_blank",
    "is_fence",
    "is_unordered_item",
    "ordered_item_digits",
]
