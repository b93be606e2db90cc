"""Render inline marks, code spans, and sidenotes into HTML fragments.

The inline dialect is deliberately small: ``**bold**``, ``__italic__``,
``==highlight==``, single-backtick code spans, and two note constructs,
``^[sidenote]`` and ``^-[margin note]``. Note contents are rendered by
re-entering the same renderer, so notes may carry their own marks.

Example
-------
>>> from mksite.markup.inline import InlineRenderer
>>> from mksite.markup.state import ParseState
>>> InlineRenderer().render("a **b** `c`", ParseState())
'a <strong>b</strong> <code>c</code>'
"""

from __future__ import annotations

import dataclasses as dc
from html import escape

from .state import ParseState

TOGGLE_MARKS: dict[str, str] = {"**": "strong", "__": "em", "==": "mark"}
CLOSE_ORDER = ("strong", "em", "mark")
BACKTICK = "`"


@dc.dataclass(frozen=True, slots=True)
class NoteStyle:
    """Markup variant for a note construct.

    Attributes
    ----------
    opener : str
        Literal that introduces the note, up to and including ``[``.
    id_prefix : str
        Prefix of the element id (``sn`` or ``mn``).
    css_class : str
        Class applied to the note ``<span>``.
    label_class : str
        Class list applied to the toggle ``<label>``.
    label_text : str
        Content of the toggle label.
    """

    opener: str
    id_prefix: str
    css_class: str
    label_class: str
    label_text: str = ""


SIDENOTE = NoteStyle(
    opener="^[",
    id_prefix="sn",
    css_class="sidenote",
    label_class="margin-toggle sidenote-number",
)
MARGIN_NOTE = NoteStyle(
    opener="^-[",
    id_prefix="mn",
    css_class="marginnote",
    label_class="margin-toggle",
    label_text="&#8853;",
)
NOTE_STYLES = (SIDENOTE, MARGIN_NOTE)


def escape_code(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for inclusion in a code block."""
    return escape(text, quote=False)


def find_note_end(text: str, open_bracket: int) -> int:
    """Return the index of the ``]`` balancing ``text[open_bracket]``, or -1."""
    depth = 0
    for index in range(open_bracket, len(text)):
        char = text[index]
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return index
    return -1


class InlineRenderer:
    """Render a run of inline text into HTML using a page's parse state."""

    def render(self, text: str, state: ParseState) -> str:
        """Return the HTML fragment for ``text``.

        Parameters
        ----------
        text : str
            Inline text with no block markers.
        state : ParseState
            Page state providing the shared note counter.

        Returns
        -------
        str
            Rendered HTML. Unbalanced toggles are closed at the end in the
            order strong, em, mark; unmatched backticks and note openers are
            emitted literally.
        """
        parts: list[str] = []
        open_marks: set[str] = set()
        start = 0
        index = 0
        length = len(text)

        def flush(end: int) -> None:
            if end > start:
                parts.append(text[start:end])

        while index < length:
            char = text[index]
            pair = text[index : index + 2]
            if pair in TOGGLE_MARKS:
                flush(index)
                tag = TOGGLE_MARKS[pair]
                if tag in open_marks:
                    open_marks.remove(tag)
                    parts.append(f"</{tag}>")
                else:
                    open_marks.add(tag)
                    parts.append(f"<{tag}>")
                index += 2
                start = index
                continue

            if char == BACKTICK and text[index + 1 : index + 2] != BACKTICK:
                close = text.find(BACKTICK, index + 1)
                if close != -1:
                    flush(index)
                    parts.append(f"<code>{text[index + 1 : close]}</code>")
                    index = close + 1
                    start = index
                    continue

            if char == "^":
                rendered, end = self._render_note(text, index, state)
                if rendered is not None:
                    flush(index)
                    parts.append(rendered)
                    index = end
                    start = index
                    continue

            index += 1

        flush(length)
        parts.extend(f"</{tag}>" for tag in CLOSE_ORDER if tag in open_marks)
        return "".join(parts)

    def _render_note(
        self, text: str, index: int, state: ParseState
    ) -> tuple[str | None, int]:
        """Render the note starting at ``text[index]``; return ``(None, index)`` if none."""
        for style in NOTE_STYLES:
            if not text.startswith(style.opener, index):
                continue
            open_bracket = index + len(style.opener) - 1
            close = find_note_end(text, open_bracket)
            if close == -1:
                return None, index
            note_id = f"{style.id_prefix}-{state.next_note_id()}"
            content = self.render(text[open_bracket + 1 : close], state)
            html = (
                f'<label for="{note_id}" class="{style.label_class}">'
                f"{style.label_text}</label>"
                f'<input type="checkbox" id="{note_id}" class="margin-toggle"/>'
                f'<span class="{style.css_class}">{content}</span>'
            )
            return html, close + 1
        return None, index


__all__ = [
    "MARGIN_NOTE",
    "SIDENOTE",
    "InlineRenderer",
    "NoteStyle",
    "escape_code",
    "find_note_end",
]
