"""Tag mode scanner mixin."""

from __future__ import annotations

from collections.abc import Iterator

from rainbowtags.lexer.modes import TAG_NAME_PATTERN
from rainbowtags.lexer.scanners.expressions import find_tag_end
from rainbowtags.tokens import TagMatch


class TagScannerMixin:
    """Mixin providing tag scanning and the raw-text short-circuit.

    Called with the cursor on a ``<`` that does not open a comment or
    doctype.

    """

    # These will be set by the TagLexer class
    _source: str
    _pos: int
    _end: int
    _raw_text_elements: frozenset[str]
    _void_elements: frozenset[str]

    def _scan_tag(self) -> Iterator[TagMatch]:
        """Bound the tag at the cursor and yield it if it names an element.

        Yields:
            The tag's match, then the raw-text closing match when the tag
            opens a script/style body.
        """
        start = self._pos
        gt = find_tag_end(self._source, start + 1, self._end)
        if gt == -1:
            # No terminator: the "<" is plain text
            self._pos = start + 1
            return

        self._pos = gt + 1
        text = self._source[start : gt + 1]

        # Processing instructions, CDATA and other declarations
        if text.startswith("<?") or (text.startswith("<!") and not text.startswith("<!DOCTYPE")):
            return

        match = self._match_tag(start, text)
        if match is None:
            return
        yield match

        if (
            not match.is_closing
            and not match.is_self_closing
            and match.name in self._raw_text_elements
        ):
            yield from self._scan_raw_text_close(match)

    def _match_tag(self, start: int, text: str) -> TagMatch | None:
        """Classify a bounded ``<...>`` span, or None if it has no tag name."""
        name_match = TAG_NAME_PATTERN.match(text)
        if name_match is None:
            return None
        name = name_match.group(2).lower()
        return TagMatch(
            start=start,
            end=start + len(text) - 1,
            name=name,
            text=text,
            is_closing=bool(name_match.group(1)),
            is_self_closing_syntax=text.endswith("/>"),
            is_void=name in self._void_elements,
        )

    def _scan_raw_text_close(self, opener: TagMatch) -> Iterator[TagMatch]:
        """Jump over a raw-text body straight to its closing tag.

        The body between the opener and the first ``</name`` is never scanned.
        The closing match carries the opener's name so the engine pairs them.
        When no closing tag exists in the segment, nothing is skipped.
        """
        close_start = self._source.find(f"</{opener.name}", self._pos, self._end)
        if close_start == -1:
            return
        close_gt = self._source.find(">", close_start + 2, self._end)
        if close_gt == -1:
            return

        text = self._source[close_start : close_gt + 1]
        self._pos = close_gt + 1
        yield TagMatch(
            start=close_start,
            end=close_gt,
            name=opener.name,
            text=text,
            is_closing=True,
            is_self_closing_syntax=text.endswith("/>"),
        )
