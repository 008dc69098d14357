"""Offset-to-position mapping for rendering layers.

Spans carry absolute offsets in Python code points. Editors address text by
``(line, character)``; LineIndex converts between the two. The character
column counts code points by default. Editors whose columns count UTF-16
code units (VS Code, LSP clients) need ``ColumnUnit.UTF16``, where every
character outside the Basic Multilingual Plane (most emoji) takes two columns.

Thread Safety:
SourcePosition and SourceRange are frozen (immutable) and safe to share
across threads. LineIndex is read-only after construction.

"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum, auto

from rainbowtags.tokens import ColoredSpan

_BMP_MAX = 0xFFFF


class ColumnUnit(Enum):
    """What the ``character`` column of a SourcePosition counts."""

    CODE_POINT = auto()
    UTF16 = auto()


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """A 0-indexed ``(line, character)`` position.

    Examples:
            >>> SourcePosition(2, 4)
        SourcePosition(line=2, character=4)

    """

    line: int
    character: int

    def __str__(self) -> str:
        """Format as 1-indexed ``line:col`` for messages."""
        return f"{self.line + 1}:{self.character + 1}"


@dataclass(frozen=True, slots=True)
class SourceRange:
    """Half-open range between two positions."""

    start: SourcePosition
    end: SourcePosition


def _utf16_length(text: str) -> int:
    return len(text) + sum(1 for ch in text if ord(ch) > _BMP_MAX)


class LineIndex:
    """Line-start table for one snapshot of a buffer.

    Example:
        >>> index = LineIndex("<a>\\n</a>")
        >>> index.position_at(5)
        SourcePosition(line=1, character=1)
        >>> LineIndex("\\U0001F600<a>", unit=ColumnUnit.UTF16).position_at(1)
        SourcePosition(line=0, character=2)

    """

    __slots__ = ("_line_starts", "_length", "_text", "_unit")

    def __init__(self, text: str, *, unit: ColumnUnit = ColumnUnit.CODE_POINT) -> None:
        starts = [0]
        pos = text.find("\n")
        while pos != -1:
            starts.append(pos + 1)
            pos = text.find("\n", pos + 1)
        self._line_starts = starts
        self._length = len(text)
        self._text = text
        self._unit = unit

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    @property
    def unit(self) -> ColumnUnit:
        return self._unit

    def position_at(self, offset: int) -> SourcePosition:
        """Convert an absolute offset, clamped to the buffer bounds."""
        offset = max(0, min(offset, self._length))
        line = bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[line]
        if self._unit is ColumnUnit.UTF16:
            return SourcePosition(line, _utf16_length(self._text[line_start:offset]))
        return SourcePosition(line, offset - line_start)

    def offset_at(self, position: SourcePosition) -> int:
        """Convert a position back to an absolute offset (clamped)."""
        if position.line < 0:
            return 0
        if position.line >= len(self._line_starts):
            return self._length
        line_start = self._line_starts[position.line]
        character = max(0, position.character)
        if self._unit is ColumnUnit.CODE_POINT:
            return min(line_start + character, self._length)

        offset = line_start
        while character > 0 and offset < self._length:
            character -= 2 if ord(self._text[offset]) > _BMP_MAX else 1
            offset += 1
        return offset

    def span_range(self, span: ColoredSpan) -> SourceRange:
        """Editor range covering a colored span."""
        return SourceRange(self.position_at(span.start), self.position_at(span.end))
