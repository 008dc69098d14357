"""Single-pass tag lexer for rainbowtags.

Architecture:
lexer/
├── __init__.py          # Re-exports TagLexer, LexerMode
├── core.py              # TagLexer class (mixin composition + mode dispatch)
├── modes.py             # LexerMode enum, markers, tag-name pattern
└── scanners/            # Mode-specific scanners
    ├── markup.py        # Comment and doctype modes
    ├── tag.py           # Tag bounding, naming, raw-text skip
    └── expressions.py   # Bracket and ${...} placeholder scanning

Usage:
    >>> from rainbowtags.lexer import TagLexer
    >>> from rainbowtags.tokens import Segment
    >>> [m.name for m in TagLexer("<a><b/></a>", Segment(0, 11)).tokenize()]
    ['a', 'b', 'a']

"""

from rainbowtags.lexer.core import TagLexer
from rainbowtags.lexer.modes import TAG_NAME_PATTERN, LexerMode

__all__ = ["LexerMode", "TAG_NAME_PATTERN", "TagLexer"]
