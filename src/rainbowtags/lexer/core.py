"""Single-pass tag lexer.

Walks one segment of the source with a forward-only cursor and yields a
TagMatch for every tag it can bound and name. Comments, doctypes and
processing instructions are consumed silently. Every step advances the
cursor, so lexing is O(n) in the segment length.

Thread Safety:
TagLexer instances are single-use. Create one per segment.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from rainbowtags.config import RAW_TEXT_ELEMENTS, VOID_ELEMENTS
from rainbowtags.lexer.modes import COMMENT_OPEN, DOCTYPE_OPEN, LexerMode
from rainbowtags.lexer.scanners import MarkupScannerMixin, TagScannerMixin
from rainbowtags.tokens import Segment, TagMatch


class TagLexer(
    MarkupScannerMixin,
    TagScannerMixin,
):
    """Fault-tolerant tag lexer over one segment.

    Usage:
        >>> source = "<p>Hi<br></p>"
        >>> for match in TagLexer(source, Segment(0, len(source))).tokenize():
        ...     print(match.name, match.is_closing)
        p False
        br False
        p True

    Malformed input never raises: an unbounded ``<`` is text, an unnamed
    ``<...>`` span is skipped, and unterminated comments or doctypes
    consume the rest of the segment.

    """

    __slots__ = (
        "_source",
        "_pos",
        "_end",
        "_mode",
        "_raw_text_elements",
        "_void_elements",
    )

    def __init__(
        self,
        source: str,
        segment: Segment,
        *,
        raw_text_elements: frozenset[str] = RAW_TEXT_ELEMENTS,
        void_elements: frozenset[str] = VOID_ELEMENTS,
    ) -> None:
        """Initialize lexer over ``source[segment.start:segment.end]``.

        Args:
            source: Full buffer text (offsets stay absolute)
            segment: Range to scan
            raw_text_elements: Elements whose body is skipped
            void_elements: Elements that never open a scope
        """
        self._source = source
        self._pos = segment.start
        self._end = min(segment.end, len(source))
        self._mode = LexerMode.TEXT
        self._raw_text_elements = raw_text_elements
        self._void_elements = void_elements

    def tokenize(self) -> Iterator[TagMatch]:
        """Yield tag matches in document order.

        Complexity: O(n) where n = len(segment)
        """
        while self._pos < self._end:
            yield from self._dispatch_mode()

    def _dispatch_mode(self) -> Iterator[TagMatch]:
        """Dispatch to appropriate scanner based on current mode."""
        if self._mode == LexerMode.TEXT:
            yield from self._scan_text()
        elif self._mode == LexerMode.COMMENT:
            self._scan_comment()
        elif self._mode == LexerMode.DOCTYPE:
            self._scan_doctype()

    def _scan_text(self) -> Iterator[TagMatch]:
        """Jump to the next ``<`` and decide which mode it opens."""
        source = self._source
        lt = source.find("<", self._pos, self._end)
        if lt == -1:
            self._pos = self._end
            return
        self._pos = lt

        if source.startswith(COMMENT_OPEN, lt, self._end):
            self._mode = LexerMode.COMMENT
            self._pos = lt + len(COMMENT_OPEN)
            return
        if source.startswith(DOCTYPE_OPEN, lt, self._end):
            self._mode = LexerMode.DOCTYPE
            self._pos = lt + len(DOCTYPE_OPEN)
            return

        yield from self._scan_tag()
