"""Line classification, inline rendering, and block parsing for post bodies."""

from .blocks import BlockParser, HtmlSink, render_body
from .inline import InlineRenderer, escape_code
from .lines import Line, LineKind, classify_line
from .state import BlockKind, ParseState

__all__ = [
    "BlockKind",
    "BlockParser",
    "HtmlSink",
    "InlineRenderer",
    "Line",
    "LineKind",
    "ParseState",
    "classify_line",
    "escape_code",
    "render_body",
]
