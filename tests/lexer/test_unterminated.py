"""Unterminated constructs at segment end are absorbed silently."""

import pytest

from rainbowtags.lexer import TagLexer
from rainbowtags.tokens import Segment


def lex_names(source: str) -> list[str]:
    return [m.name for m in TagLexer(source, Segment(0, len(source))).tokenize()]


class TestUnterminated:
    def test_comment_consumes_rest(self) -> None:
        assert lex_names("<a><!-- <b></b>") == ["a"]

    def test_comment_closed_only_inside_segment(self) -> None:
        source = "<!-- x --><a>"
        result = [m.name for m in TagLexer(source, Segment(0, 8)).tokenize()]
        assert result == []

    def test_doctype_consumes_rest(self) -> None:
        assert lex_names("<!DOCTYPE html") == []

    @pytest.mark.parametrize("source", ["<div", "<div class='x>", '<div a="b', "<a ${x"])
    def test_partial_tag(self, source: str) -> None:
        assert lex_names(source) == []

    def test_partial_tag_before_complete_tag(self) -> None:
        # The first "<" is bounded by the next tag's ">" and lexed as one span
        assert lex_names("<div <span>") == ["div"]

    def test_partial_tag_at_end_after_content(self) -> None:
        assert lex_names("<p>text</p><sp") == ["p", "p"]
