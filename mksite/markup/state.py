"""Per-page parse state shared by the block parser and the inline renderer."""

from __future__ import annotations

import dataclasses as dc
import enum


class BlockKind(enum.Enum):
    """Multi-line block currently open in the output."""

    NONE = "none"
    CODE = "code"
    UL = "ul"
    OL = "ol"


@dc.dataclass(slots=True)
class ParseState:
    """Mutable state for rendering one page body.

    Attributes
    ----------
    in_section : bool
        Whether a ``<section>`` opened by a level-2 heading is still open.
    in_paragraph : bool
        Whether a ``<p>`` is open.
    block : BlockKind
        The list or code block currently open, if any.
    note_counter : int
        Last note id handed out; sidenotes and margin notes share it.
    """

    in_section: bool = False
    in_paragraph: bool = False
    block: BlockKind = BlockKind.NONE
    note_counter: int = 0

    def next_note_id(self) -> int:
        """Pre-increment the note counter and return the new id."""
        self.note_counter += 1
        return self.note_counter


__all__ = ["BlockKind", "ParseState"]
