"""Decide whether (and how) a buffer carries markup.

Maps editor language identifiers, with a file-name fallback for HTML, to
the ContentKind the scanner expects.
"""

from __future__ import annotations

from rainbowtags.tokens import ContentKind

LANGUAGE_KINDS: dict[str, ContentKind] = {
    "html": ContentKind.MARKUP,
    "javascript": ContentKind.HOST_LANGUAGE,
    "typescript": ContentKind.HOST_LANGUAGE,
    "javascriptreact": ContentKind.MARKUP_WITH_EMBEDDED_EXPRESSIONS,
    "typescriptreact": ContentKind.MARKUP_WITH_EMBEDDED_EXPRESSIONS,
}

MARKUP_SUFFIXES = (".html", ".htm")


def classify_content(language_id: str | None, file_name: str | None = None) -> ContentKind | None:
    """Return the content kind of a buffer, or None if it should not be scanned.

    Args:
        language_id: Editor language identifier (e.g. ``"typescriptreact"``)
        file_name: Buffer file name, used when the language id is not recognized

    Example:
        >>> classify_content("javascript")
        <ContentKind.HOST_LANGUAGE: 2>
        >>> classify_content("plaintext", "index.HTM")
        <ContentKind.MARKUP: 1>
        >>> classify_content("python") is None
        True
    """
    if language_id:
        kind = LANGUAGE_KINDS.get(language_id.lower())
        if kind is not None:
            return kind
    if file_name and file_name.lower().endswith(MARKUP_SUFFIXES):
        return ContentKind.MARKUP
    return None
