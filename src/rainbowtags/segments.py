"""Segment extraction: which parts of a buffer hold markup.

Markup documents (HTML, JSX/TSX) are scanned whole. Host-language buffers
(JavaScript/TypeScript) carry markup only inside ``html`` tagged template
literals::

    const view = html`<ul>${items.map((i) => html`<li>${i}</li>`)}</ul>`;
    const other = lit.html`<p></p>`;

Each such literal body becomes one Segment. Placeholders are skipped when
looking for the closing back-tick, but stay inside the segment; the tag
lexer handles ``${...}`` on its own. Tagged literals nested inside a
placeholder belong to their enclosing segment. An untagged literal is
skipped whole, apart from the code in its placeholders.
"""

from __future__ import annotations

from rainbowtags.lexer.modes import EXPRESSION_OPEN
from rainbowtags.lexer.scanners.expressions import find_template_end, skip_expression
from rainbowtags.tokens import ContentKind, Segment

TEMPLATE_TAG = "html"

_IDENT_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_$")


def extract_segments(text: str, kind: ContentKind) -> list[Segment]:
    """Return the ranges of ``text`` to scan for tags, in document order.

    Args:
        text: Full buffer text
        kind: How the buffer carries markup

    Returns:
        Non-overlapping segments in increasing order. Unterminated template
        literals produce no segment.
    """
    if kind is not ContentKind.HOST_LANGUAGE:
        return [Segment(0, len(text))]

    segments: list[Segment] = []
    # Ranges of host code still to search: the buffer, then the placeholders
    # of untagged literals
    pending = [(0, len(text))]
    while pending:
        start, end = pending.pop()
        i = text.find("`", start, end)
        while i != -1:
            close = find_template_end(text, i + 1, end)
            if close == -1:
                i = text.find("`", i + 1, end)
                continue
            if _is_tagged_template(text, i):
                segments.append(Segment(i + 1, close))
            else:
                # The closing back-tick never opens a literal of its own
                pending.extend(_placeholder_ranges(text, i + 1, close))
            i = text.find("`", close + 1, end)
    segments.sort(key=lambda segment: segment.start)
    return segments


def _placeholder_ranges(text: str, pos: int, close: int) -> list[tuple[int, int]]:
    """Return the code ranges inside the ``${...}`` placeholders of a literal body."""
    ranges = []
    i = pos
    while i < close:
        if text[i] == "\\":
            i += 2
            continue
        if text.startswith(EXPRESSION_OPEN, i, close):
            after = skip_expression(text, i + 2, close)
            if after == -1:
                break
            ranges.append((i + 2, after - 1))
            i = after
            continue
        i += 1
    return ranges


def _is_tagged_template(text: str, backtick: int) -> bool:
    """Check whether the back-tick at ``backtick`` follows an ``html`` tag.

    The tag may be the last link of a dotted chain (``lit.html``) and may be
    separated from the back-tick by whitespace, including a line break that
    follows a ``//`` comment.
    """
    k = _skip_whitespace_back(text, backtick - 1)
    if k < backtick - 1 and "\n" in text[k + 1 : backtick]:
        k = _skip_line_comment_back(text, k)
    return _identifier_before(text, k) == TEMPLATE_TAG


def _skip_whitespace_back(text: str, k: int) -> int:
    while k >= 0 and text[k].isspace():
        k -= 1
    return k


def _skip_line_comment_back(text: str, k: int) -> int:
    """Move ``k`` before a trailing ``//`` comment on its line, if any.

    A ``//`` only counts when it sits outside quotes on that line.
    """
    line_start = text.rfind("\n", 0, k + 1) + 1
    line = text[line_start : k + 1]
    search_from = 0
    while True:
        idx = line.find("//", search_from)
        if idx == -1:
            return k
        prefix = line[:idx]
        if all(prefix.count(q) % 2 == 0 for q in "'\"`"):
            return _skip_whitespace_back(text, line_start + idx - 1)
        search_from = idx + 2


def _identifier_before(text: str, k: int) -> str:
    """Return the identifier ending at offset ``k`` (empty if none)."""
    start = k
    while start >= 0 and text[start] in _IDENT_CHARS:
        start -= 1
    return text[start + 1 : k + 1]
