"""Mode-specific scanners for the tag lexer.

Each scanner is a mixin that provides scanning logic for a specific
lexer mode (TEXT tags, COMMENT, DOCTYPE). ``expressions`` holds the
bracket and placeholder scanners shared with the segment extractor.
"""

from __future__ import annotations

from rainbowtags.lexer.scanners.expressions import (
    find_tag_end,
    find_template_end,
    skip_expression,
)
from rainbowtags.lexer.scanners.markup import MarkupScannerMixin
from rainbowtags.lexer.scanners.tag import TagScannerMixin

__all__ = [
    "MarkupScannerMixin",
    "TagScannerMixin",
    "find_tag_end",
    "find_template_end",
    "skip_expression",
]
