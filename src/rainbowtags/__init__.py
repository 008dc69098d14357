"""
rainbowtags: rainbow coloring for markup tags

Colors tag delimiters and tag names so that sibling tags rotate through a
palette, a child never shares its parent's color, and each opening tag
shares its color with the matching closing tag. Built for editor buffers
mid-edit: malformed, partial or mismatched markup never raises.

Quick Start:
    >>> from rainbowtags import ContentKind, scan
    >>> spans = scan("<div><span></span></div>", ContentKind.MARKUP)
    >>> [(s.start, s.end, s.color_index) for s in spans if s.channel.value == "name"]
    [(1, 4, 0), (6, 10, 1), (13, 17, 1), (20, 23, 0)]

    >>> # Markup inside html`...` template literals
    >>> spans = scan("const v = html`<p>${x}</p>`;", ContentKind.HOST_LANGUAGE)

Editor integration:
    >>> from rainbowtags import HighlightSession, BufferSnapshot
    >>> session = HighlightSession(lambda: BufferSnapshot(text, "html"), renderer)  # doctest: +SKIP
    >>> session.activate()   # doctest: +SKIP

Installation:
    pip install rainbowtags          # Core (zero deps)
    pip install rainbowtags[test]    # + pytest, hypothesis
"""

from rainbowtags.classify import classify_content
from rainbowtags.config import (
    RAINBOW_COLORS,
    HighlightConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)
from rainbowtags.decorations import DecorationSet, DecorationSink
from rainbowtags.emitter import emit_tag_spans
from rainbowtags.engine import ColorEngine, ScanState, StackEntry
from rainbowtags.errors import ConfigError, RainbowTagsError
from rainbowtags.lexer import TagLexer
from rainbowtags.location import ColumnUnit, LineIndex, SourcePosition, SourceRange
from rainbowtags.scanner import iter_colored_tags, scan
from rainbowtags.segments import extract_segments
from rainbowtags.session import BufferSnapshot, HighlightSession
from rainbowtags.tokens import Channel, ColoredSpan, ContentKind, Segment, TagMatch

__version__ = "0.1.0"

__all__ = [
    # Main API
    "scan",
    "iter_colored_tags",
    "classify_content",
    # Pipeline stages
    "extract_segments",
    "TagLexer",
    "ColorEngine",
    "ScanState",
    "StackEntry",
    "emit_tag_spans",
    # Value types
    "Channel",
    "ColoredSpan",
    "ContentKind",
    "Segment",
    "TagMatch",
    # Configuration
    "HighlightConfig",
    "RAINBOW_COLORS",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    # Rendering support
    "BufferSnapshot",
    "DecorationSet",
    "DecorationSink",
    "HighlightSession",
    "ColumnUnit",
    "LineIndex",
    "SourcePosition",
    "SourceRange",
    # Errors
    "ConfigError",
    "RainbowTagsError",
    "__version__",
]
