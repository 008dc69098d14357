"""Comment and doctype mode scanner mixin."""

from __future__ import annotations

from rainbowtags.lexer.modes import COMMENT_CLOSE, LexerMode


class MarkupScannerMixin:
    """Mixin providing COMMENT and DOCTYPE mode scanning logic.

    Both constructs are consumed without producing matches. An unterminated
    construct swallows the rest of the segment.

    """

    # These will be set by the TagLexer class
    _source: str
    _pos: int
    _end: int
    _mode: LexerMode

    def _scan_comment(self) -> None:
        """Consume through the next ``-->`` (or to segment end)."""
        close = self._source.find(COMMENT_CLOSE, self._pos, self._end)
        self._pos = self._end if close == -1 else close + len(COMMENT_CLOSE)
        self._mode = LexerMode.TEXT

    def _scan_doctype(self) -> None:
        """Consume through the next ``>`` (or to segment end)."""
        close = self._source.find(">", self._pos, self._end)
        self._pos = self._end if close == -1 else close + 1
        self._mode = LexerMode.TEXT
