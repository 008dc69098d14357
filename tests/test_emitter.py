"""Tests for splitting tags into delimiter and name spans."""

import pytest

from rainbowtags.emitter import emit_tag_spans
from rainbowtags.tokens import Channel, ColoredSpan


def _pieces(start: int, text: str) -> list[tuple[int, int, str]]:
    return [(s.start, s.end, s.channel.value) for s in emit_tag_spans(start, text, 3)]


class TestDelimiters:
    def test_opening_tag(self) -> None:
        assert _pieces(0, "<div>") == [
            (0, 1, "delimiter"),
            (1, 4, "name"),
            (4, 5, "delimiter"),
        ]

    def test_closing_tag(self) -> None:
        assert _pieces(5, "</div>") == [
            (5, 6, "delimiter"),
            (6, 7, "delimiter"),
            (7, 10, "name"),
            (10, 11, "delimiter"),
        ]

    def test_self_closing_syntax(self) -> None:
        assert _pieces(0, "<br/>") == [
            (0, 1, "delimiter"),
            (1, 3, "name"),
            (3, 4, "delimiter"),
            (4, 5, "delimiter"),
        ]

    def test_attributes_never_colored(self) -> None:
        text = '<img src="x.png" />'
        assert _pieces(100, text) == [
            (100, 101, "delimiter"),
            (101, 104, "name"),
            (100 + len(text) - 2, 100 + len(text) - 1, "delimiter"),
            (100 + len(text) - 1, 100 + len(text), "delimiter"),
        ]

    def test_whitespace_before_name(self) -> None:
        assert _pieces(0, "</ div>") == [
            (0, 1, "delimiter"),
            (1, 2, "delimiter"),
            (3, 6, "name"),
            (6, 7, "delimiter"),
        ]

    def test_empty_text(self) -> None:
        assert emit_tag_spans(0, "", 0) == []


class TestColor:
    @pytest.mark.parametrize("text", ["<a>", "</a>", "<a/>", '<my-el data-x="1">'])
    def test_all_pieces_share_color(self, text: str) -> None:
        spans = emit_tag_spans(0, text, 4)
        assert {s.color_index for s in spans} == {4}

    def test_single_name_span(self) -> None:
        spans = emit_tag_spans(7, "<svg:rect/>", 0)
        names = [s for s in spans if s.channel is Channel.NAME]
        assert names == [ColoredSpan(8, 16, 0, Channel.NAME)]
