r"""Single-pass block parser that turns a post body into HTML.

The parser walks the body line by line, classifies each line with
:func:`~mksite.markup.lines.classify_line`, and emits the block envelope for
sections, paragraphs, lists, headings, and fenced code. Inline text is handed
to :class:`~mksite.markup.inline.InlineRenderer`. Output is written to any
sink exposing ``write(str)``; errors raised by the sink propagate unchanged.

Example
-------
>>> from mksite.markup.blocks import render_body
>>> render_body("one\ntwo\n\nthree")
'<p>one two</p>\n<p>three</p>\n'
"""

from __future__ import annotations

import io
import typing as typ

from loguru import logger

from mksite._constants import SCRATCH_BUFFER_SIZE

from .inline import InlineRenderer, escape_code
from .lines import Line, LineKind, classify_line
from .state import BlockKind, ParseState


class HtmlSink(typ.Protocol):
    """Minimal writer interface the parser emits into."""

    def write(self, text: str, /) -> int | None:
        """Write ``text`` to the underlying output."""
        ...


_LIST_BLOCKS = {
    LineKind.UNORDERED_ITEM: BlockKind.UL,
    LineKind.ORDERED_ITEM: BlockKind.OL,
}


class BlockParser:
    """Render post bodies block by block into an HTML sink."""

    def __init__(
        self,
        inline: InlineRenderer | None = None,
        *,
        buffer_size: int = SCRATCH_BUFFER_SIZE,
    ) -> None:
        """Initialize the parser.

        Parameters
        ----------
        inline : InlineRenderer, optional
            Renderer used for heading, list item, and paragraph text.
        buffer_size : int, optional
            Maximum UTF-8 size of a collected paragraph or code block;
            longer content is truncated.
        """
        self.inline = inline or InlineRenderer()
        self.buffer_size = buffer_size

    def render(
        self, body: str, sink: HtmlSink, state: ParseState | None = None
    ) -> ParseState:
        """Write the HTML for ``body`` into ``sink`` and return the final state.

        Parameters
        ----------
        body : str
            Post body with ``\n`` line terminators.
        sink : HtmlSink
            Destination for the emitted HTML.
        state : ParseState, optional
            State to render with; a fresh one is created when omitted.

        Returns
        -------
        ParseState
            The state after every open block has been closed.
        """
        state = state or ParseState()
        lines = body.split("\n")
        if body.endswith("\n"):
            # A trailing terminator does not open another line.
            lines.pop()
        index = 0
        while index < len(lines):
            line = classify_line(lines[index])
            match line.kind:
                case LineKind.BLANK:
                    self.close_paragraph(sink, state)
                    self.close_list(sink, state)
                    index += 1
                case LineKind.FENCE:
                    self.close_paragraph(sink, state)
                    self.close_list(sink, state)
                    index = self._emit_code_block(lines, index + 1, sink, state)
                case LineKind.HEADING:
                    self.close_paragraph(sink, state)
                    self.close_list(sink, state)
                    self._emit_heading(line, sink, state)
                    index += 1
                case LineKind.UNORDERED_ITEM | LineKind.ORDERED_ITEM:
                    self.close_paragraph(sink, state)
                    self._emit_list_item(line, sink, state)
                    index += 1
                case _:
                    self.close_list(sink, state)
                    index = self._emit_paragraph(lines, index, sink, state)

        self.close_list(sink, state)
        self.close_paragraph(sink, state)
        self.close_section(sink, state)
        return state

    @staticmethod
    def close_paragraph(sink: HtmlSink, state: ParseState) -> None:
        """Close an open ``<p>``; no-op otherwise."""
        if state.in_paragraph:
            sink.write("</p>\n")
            state.in_paragraph = False

    @staticmethod
    def close_list(sink: HtmlSink, state: ParseState) -> None:
        """Close an open ``<ul>`` or ``<ol>``; no-op otherwise."""
        if state.block in (BlockKind.UL, BlockKind.OL):
            sink.write(f"</{state.block.value}>\n")
            state.block = BlockKind.NONE

    @staticmethod
    def close_section(sink: HtmlSink, state: ParseState) -> None:
        """Close an open ``<section>``; no-op otherwise."""
        if state.in_section:
            sink.write("</section>\n")
            state.in_section = False

    def _emit_heading(self, line: Line, sink: HtmlSink, state: ParseState) -> None:
        if line.level == 2:
            self.close_section(sink, state)
            sink.write("<section>\n")
            state.in_section = True
        text = self.inline.render(line.body, state)
        sink.write(f"<h{line.level}>{text}</h{line.level}>\n")

    def _emit_list_item(self, line: Line, sink: HtmlSink, state: ParseState) -> None:
        target = _LIST_BLOCKS[line.kind]
        if state.block is not target:
            self.close_list(sink, state)
            sink.write(f"<{target.value}>\n")
            state.block = target
        text = self.inline.render(line.body, state)
        sink.write(f"<li>{text}</li>\n")

    def _emit_paragraph(
        self, lines: list[str], index: int, sink: HtmlSink, state: ParseState
    ) -> int:
        """Collect consecutive paragraph lines from ``index`` and emit one ``<p>``."""
        collected: list[str] = []
        while index < len(lines):
            if classify_line(lines[index]).kind is not LineKind.PARAGRAPH:
                break
            collected.append(lines[index])
            index += 1
        text = self._bounded(" ".join(collected), "paragraph")
        sink.write("<p>")
        state.in_paragraph = True
        sink.write(self.inline.render(text, state))
        self.close_paragraph(sink, state)
        return index

    def _emit_code_block(
        self, lines: list[str], index: int, sink: HtmlSink, state: ParseState
    ) -> int:
        """Emit the fenced block whose content starts at ``index``.

        Returns the index of the first line after the closing fence, or the
        line count when the fence is never closed.
        """
        collected: list[str] = []
        state.block = BlockKind.CODE
        while index < len(lines):
            if classify_line(lines[index]).kind is LineKind.FENCE:
                index += 1
                break
            collected.append(lines[index])
            index += 1
        code = self._bounded("\n".join(collected), "code block")
        sink.write(f"<pre><code>{escape_code(code)}</code></pre>\n")
        state.block = BlockKind.NONE
        return index

    def _bounded(self, text: str, label: str) -> str:
        """Clamp ``text`` to the scratch buffer size, logging any truncation."""
        encoded = text.encode("utf-8")
        if len(encoded) <= self.buffer_size:
            return text
        logger.warning(
            "Truncating {} of {} bytes to {} bytes",
            label,
            len(encoded),
            self.buffer_size,
        )
        return encoded[: self.buffer_size].decode("utf-8", errors="ignore")


def render_body(body: str, *, buffer_size: int = SCRATCH_BUFFER_SIZE) -> str:
    """Render ``body`` with a fresh parse state and return the HTML string."""
    sink = io.StringIO()
    BlockParser(buffer_size=buffer_size).render(body, sink)
    return sink.getvalue()


__all__ = ["BlockParser", "HtmlSink", "render_body"]
