"""Tests for buffer content classification."""

import pytest

from rainbowtags import ContentKind, classify_content


@pytest.mark.parametrize(
    "language_id,file_name,expected",
    [
        ("html", None, ContentKind.MARKUP),
        ("HTML", None, ContentKind.MARKUP),
        ("javascript", "app.js", ContentKind.HOST_LANGUAGE),
        ("typescript", None, ContentKind.HOST_LANGUAGE),
        ("javascriptreact", "App.jsx", ContentKind.MARKUP_WITH_EMBEDDED_EXPRESSIONS),
        ("typescriptreact", None, ContentKind.MARKUP_WITH_EMBEDDED_EXPRESSIONS),
        ("plaintext", "index.html", ContentKind.MARKUP),
        (None, "page.HTM", ContentKind.MARKUP),
        ("python", "main.py", None),
        (None, None, None),
        ("", "notes.txt", None),
    ],
)
def test_classify_content(
    language_id: str | None, file_name: str | None, expected: ContentKind | None
) -> None:
    assert classify_content(language_id, file_name) is expected
