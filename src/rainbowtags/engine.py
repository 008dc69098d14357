"""Depth-aware color assignment.

Assigns palette indices to tags as the lexer produces them:

- siblings at one depth rotate through the palette,
- a child never takes its immediate parent's color,
- a closing tag takes the color of the nearest open element with its name.

Malformed nesting is tolerated instead of rejected. A closing tag that
matches an ancestor implicitly closes everything opened after it; a closing
tag with no opener still gets a (best-effort) color.

Thread Safety:
ColorEngine instances are single-use. Create one per scan (or per
independent template fragment).

"""

from __future__ import annotations

from dataclasses import dataclass, field

from rainbowtags.tokens import TagMatch


@dataclass(frozen=True, slots=True)
class StackEntry:
    """An open, scope-creating element."""

    name: str
    color_index: int


@dataclass(slots=True)
class ScanState:
    """Open-element ancestry plus per-depth rotation state.

    Attributes:
        stack: Open elements, outermost first
        next_at: Color offered to the next tag opened at each depth;
            always one longer than ``stack``

    """

    stack: list[StackEntry] = field(default_factory=list)
    next_at: list[int] = field(default_factory=lambda: [0])

    @property
    def depth(self) -> int:
        return len(self.stack)


class ColorEngine:
    """Stateful color assignment over one scan.

    Usage:
        >>> engine = ColorEngine(palette_size=6)
        >>> engine.open_tag("div"), engine.open_tag("span")
        (0, 1)
        >>> engine.close_tag("span"), engine.close_tag("div")
        (1, 0)

    """

    __slots__ = ("_palette_size", "_state")

    def __init__(self, palette_size: int) -> None:
        self._palette_size = palette_size
        self._state = ScanState()

    @property
    def state(self) -> ScanState:
        return self._state

    def assign(self, match: TagMatch) -> int:
        """Assign a color to a lexed tag, updating the ancestry."""
        if match.is_closing:
            return self.close_tag(match.name)
        return self.open_tag(match.name, self_closing=match.is_self_closing)

    def open_tag(self, name: str, *, self_closing: bool = False) -> int:
        """Color an opening tag at the current depth.

        Args:
            name: Lower-cased tag name
            self_closing: Tag does not open a scope (void or ``/>``)

        Returns:
            Assigned palette index.
        """
        state = self._state
        size = self._palette_size
        depth = state.depth

        assigned = state.next_at[depth]
        if depth > 0 and assigned == state.stack[-1].color_index:
            assigned = (assigned + 1) % size

        state.next_at[depth] = (assigned + 1) % size
        if not self_closing:
            state.stack.append(StackEntry(name, assigned))
            # A new child scope always restarts just past its parent's color
            state.next_at.append((assigned + 1) % size)
        return assigned

    def close_tag(self, name: str) -> int:
        """Color a closing tag and pop its element (and any left open inside it).

        Args:
            name: Lower-cased tag name

        Returns:
            The opener's palette index, or the fallback index for an orphan.
        """
        state = self._state
        stack = state.stack
        for i in range(len(stack) - 1, -1, -1):
            if stack[i].name == name:
                color = stack[i].color_index
                del stack[i:]
                del state.next_at[i + 1 :]
                return color
        # Orphan: best effort, ancestry untouched
        return state.next_at[len(stack)]
