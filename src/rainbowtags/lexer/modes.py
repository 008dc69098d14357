"""Lexer operating modes and constants.

This module defines the finite state machine modes for the tag lexer
and the literal markers that switch between them.
"""

from __future__ import annotations

import re
from enum import Enum, auto


class LexerMode(Enum):
    """Lexer operating modes.

    The lexer switches between modes based on context:
    - TEXT: Between tags, looking for the next ``<``
    - COMMENT: Inside ``<!-- ... -->``
    - DOCTYPE: Inside ``<!DOCTYPE ...>``

    """

    TEXT = auto()
    COMMENT = auto()
    DOCTYPE = auto()


COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
DOCTYPE_OPEN = "<!DOCTYPE"
EXPRESSION_OPEN = "${"

# "<" or "</", optional whitespace, then the tag name
TAG_NAME_PATTERN = re.compile(r"<(/?)\s*([A-Za-z][A-Za-z0-9:-]*)")
