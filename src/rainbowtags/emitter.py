"""Decompose a colored tag into delimiter and name spans."""

from __future__ import annotations

from rainbowtags.lexer.modes import TAG_NAME_PATTERN
from rainbowtags.tokens import Channel, ColoredSpan


def emit_tag_spans(start: int, text: str, color_index: int) -> list[ColoredSpan]:
    """Split one tag into its colored pieces.

    Delimiters are the leading ``<``, the ``/`` of ``</``, the ``/`` of a
    trailing ``/>`` and the final ``>``. The name span covers the tag name.
    Attributes and whitespace are never colored.

    Args:
        start: Absolute offset of the tag's ``<``
        text: Exact tag text
        color_index: Palette index for every piece

    Returns:
        Spans in document order.

    Example:
        >>> [(s.start, s.end, s.channel.value) for s in emit_tag_spans(10, "</a>", 2)]
        [(10, 11, 'delimiter'), (11, 12, 'delimiter'), (12, 13, 'name'), (13, 14, 'delimiter')]
    """
    if not text:
        return []

    def delimiter(offset: int) -> ColoredSpan:
        return ColoredSpan(start + offset, start + offset + 1, color_index, Channel.DELIMITER)

    length = len(text)
    spans = [delimiter(0)]
    if text.startswith("</"):
        spans.append(delimiter(1))

    name_match = TAG_NAME_PATTERN.match(text)
    if name_match is not None:
        spans.append(
            ColoredSpan(
                start + name_match.start(2),
                start + name_match.end(2),
                color_index,
                Channel.NAME,
            )
        )

    if text.endswith("/>") and length > 2:
        spans.append(delimiter(length - 2))
    if length > 1:
        spans.append(delimiter(length - 1))
    return spans
