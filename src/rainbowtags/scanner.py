"""The scan pipeline: segments -> tags -> colors -> spans.

``scan`` is a pure function of its inputs. It holds no state between
calls and never raises for any input text.

Thread Safety:
    Safe to call from any thread; each call builds its own lexers and
    color engines.

"""

from __future__ import annotations

from collections.abc import Iterator

from rainbowtags.config import HighlightConfig, get_config
from rainbowtags.emitter import emit_tag_spans
from rainbowtags.engine import ColorEngine
from rainbowtags.lexer import TagLexer
from rainbowtags.segments import extract_segments
from rainbowtags.tokens import ColoredSpan, ContentKind, TagMatch
from rainbowtags.utils.logger import get_logger

logger = get_logger(__name__)


def iter_colored_tags(
    text: str,
    kind: ContentKind,
    *,
    config: HighlightConfig | None = None,
) -> Iterator[tuple[TagMatch, int]]:
    """Yield every recognized tag with its assigned palette index.

    Each template-literal fragment of a host-language buffer is colored
    independently; markup documents share one ancestry across the buffer.
    """
    config = config or get_config()
    shared = None
    if kind is not ContentKind.HOST_LANGUAGE:
        shared = ColorEngine(config.palette_size)

    for segment in extract_segments(text, kind):
        engine = shared if shared is not None else ColorEngine(config.palette_size)
        lexer = TagLexer(
            text,
            segment,
            raw_text_elements=config.raw_text_elements,
            void_elements=config.void_elements,
        )
        for match in lexer.tokenize():
            yield match, engine.assign(match)


def scan(
    text: str,
    kind: ContentKind,
    *,
    config: HighlightConfig | None = None,
) -> tuple[ColoredSpan, ...]:
    """Compute the colored spans for a buffer.

    Args:
        text: Full buffer text
        kind: How the buffer carries markup
        config: Highlight config (defaults to the active context config)

    Returns:
        Spans in document order.

    Example:
        >>> spans = scan("<div><span></span></div>", ContentKind.MARKUP)
        >>> sorted({s.color_index for s in spans})
        [0, 1]
    """
    spans: list[ColoredSpan] = []
    tag_count = 0
    for match, color_index in iter_colored_tags(text, kind, config=config):
        tag_count += 1
        spans.extend(emit_tag_spans(match.start, match.text, color_index))

    logger.debug(
        "Scanned %d chars (%s): %d tags, %d spans",
        len(text),
        kind.name,
        tag_count,
        len(spans),
    )
    return tuple(spans)
