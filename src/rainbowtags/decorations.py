"""Grouping of colored spans for batch application by a renderer.

Renderers typically own one decoration style per (channel, color) pair and
replace all of its ranges at once. DecorationSet buckets a scan result that
way; DecorationSink is the protocol a renderer implements to receive it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Protocol

from rainbowtags.tokens import Channel, ColoredSpan


class DecorationSink(Protocol):
    """Protocol for renderers receiving colored spans.

    Contract:
        - apply() REPLACES the ranges previously applied for the same
          (channel, color_index) pair; an empty ``spans`` clears it
        - clear() removes every range applied through this sink
    """

    def apply(
        self,
        channel: Channel,
        color_index: int,
        spans: Sequence[ColoredSpan],
        *,
        color: str,
        intensity: float,
    ) -> None: ...

    def clear(self) -> None: ...


class DecorationSet:
    """Spans bucketed by channel and palette index.

    Every (channel, index) bucket exists, possibly empty, so applying a set
    also clears colors the previous scan used and this one does not.

    Example:
        >>> from rainbowtags import ContentKind, scan
        >>> decorations = DecorationSet.from_spans(scan("<p></p>", ContentKind.MARKUP), 6)
        >>> len(decorations.ranges(Channel.NAME, 0))
        2

    """

    __slots__ = ("_buckets", "_palette_size")

    def __init__(self, palette_size: int) -> None:
        self._palette_size = palette_size
        self._buckets: dict[tuple[Channel, int], list[ColoredSpan]] = {
            (channel, index): [] for channel in Channel for index in range(palette_size)
        }

    @classmethod
    def from_spans(cls, spans: Iterable[ColoredSpan], palette_size: int) -> DecorationSet:
        decorations = cls(palette_size)
        decorations.extend(spans)
        return decorations

    @property
    def palette_size(self) -> int:
        return self._palette_size

    def extend(self, spans: Iterable[ColoredSpan]) -> None:
        for span in spans:
            self._buckets[(span.channel, span.color_index)].append(span)

    def ranges(self, channel: Channel, color_index: int) -> list[ColoredSpan]:
        """Spans painted with one palette index on one channel."""
        return self._buckets[(channel, color_index)]

    def clear(self) -> None:
        for bucket in self._buckets.values():
            bucket.clear()

    def __iter__(self) -> Iterator[tuple[Channel, int, list[ColoredSpan]]]:
        for (channel, index), bucket in self._buckets.items():
            yield channel, index, bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())
