"""Value types passed between the scanning stages.

Segment extractor -> lexer -> color engine -> emitter all communicate
through the frozen records defined here.

Thread Safety:
All records are frozen (immutable) and safe to share across threads.
Enums are inherently immutable.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ContentKind(Enum):
    """How markup is carried by a buffer.

    - MARKUP: the whole buffer is an HTML document
    - HOST_LANGUAGE: markup lives inside html`...` template literals
    - MARKUP_WITH_EMBEDDED_EXPRESSIONS: JSX/TSX, markup is structural

    """

    MARKUP = auto()
    HOST_LANGUAGE = auto()
    MARKUP_WITH_EMBEDDED_EXPRESSIONS = auto()


class Channel(Enum):
    """Visual role of a colored span.

    Both channels index the same palette; they differ only in the
    intensity a renderer applies.
    """

    DELIMITER = "delimiter"
    NAME = "name"


@dataclass(frozen=True, slots=True)
class Segment:
    """Half-open ``[start, end)`` range of the buffer eligible for tag scanning."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class TagMatch:
    """A single ``<...>`` span recognized as a tag.

    Attributes:
        start: Absolute offset of the opening ``<``
        end: Absolute offset of the terminating ``>`` (inclusive)
        name: Lower-cased tag name
        text: Exact source text of the tag, ``source[start:end + 1]``
        is_closing: Tag text starts with ``</``
        is_self_closing_syntax: Tag text ends with ``/>``
        is_void: Name is an HTML void element

    """

    start: int
    end: int
    name: str
    text: str
    is_closing: bool = False
    is_self_closing_syntax: bool = False
    is_void: bool = False

    @property
    def is_self_closing(self) -> bool:
        """Tag never opens a scope (``/>`` syntax or void element)."""
        return self.is_self_closing_syntax or self.is_void


@dataclass(frozen=True, slots=True)
class ColoredSpan:
    """Half-open ``[start, end)`` range to paint with a palette index.

    Attributes:
        start: Absolute start offset
        end: Absolute end offset (exclusive)
        color_index: Index into the palette
        channel: Delimiter or name role

    """

    start: int
    end: int
    color_index: int
    channel: Channel
