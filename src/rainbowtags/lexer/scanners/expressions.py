"""Balanced-expression and bracket scanning.

Template placeholders (``${...}``) may contain braces, quoted strings and
nested template literals that themselves contain placeholders. The scanner
keeps an explicit stack of open contexts instead of recursing, so deeply
nested or hostile input cannot exhaust the interpreter stack.

Every function takes a ``hard_end`` bound and reports failure with ``-1``;
none of them raise.
"""

from __future__ import annotations

from rainbowtags.lexer.modes import EXPRESSION_OPEN

_CODE = "{"
_QUOTES = "'\"`"


def _scan_balanced(text: str, pos: int, hard_end: int, stack: list[str]) -> int:
    """Advance until ``stack`` empties; return the offset just past the closer.

    Stack entries are ``"{"`` (code nested in braces) or a quote character
    (inside a string literal of that kind).
    """
    i = pos
    while i < hard_end:
        top = stack[-1]
        ch = text[i]
        if top == _CODE:
            if ch in _QUOTES:
                stack.append(ch)
            elif ch == "{":
                stack.append(_CODE)
            elif ch == "}":
                stack.pop()
                if not stack:
                    return i + 1
            i += 1
            continue

        # Inside a string literal
        if ch == "\\":
            i += 2
            continue
        if ch == top:
            stack.pop()
            if not stack:
                return i + 1
            i += 1
            continue
        if top == "`" and text.startswith(EXPRESSION_OPEN, i, hard_end):
            stack.append(_CODE)
            i += 2
            continue
        i += 1
    return -1


def skip_expression(text: str, pos: int, hard_end: int) -> int:
    """Skip a template placeholder body.

    Args:
        text: Source text
        pos: Offset just after the opening ``${``
        hard_end: Exclusive scan limit

    Returns:
        Offset just past the matching ``}``, or -1 if unterminated.
    """
    return _scan_balanced(text, pos, hard_end, [_CODE])


def find_template_end(text: str, pos: int, hard_end: int | None = None) -> int:
    """Find the closing back-tick of a template literal.

    Args:
        text: Source text
        pos: Offset just after the opening back-tick
        hard_end: Exclusive scan limit (defaults to end of text)

    Returns:
        Offset of the closing back-tick, or -1 if unterminated.
    """
    end = _scan_balanced(text, pos, len(text) if hard_end is None else hard_end, ["`"])
    return end - 1 if end != -1 else -1


def find_tag_end(text: str, pos: int, hard_end: int) -> int:
    """Find the ``>`` terminating a tag, honoring quotes and placeholders.

    Single and double quoted attribute values hide ``>`` (backslash escapes
    apply inside quotes). A ``${`` opens a balanced placeholder whether or not
    it sits inside quotes. Bare ``{...}`` gets no special treatment.

    Args:
        text: Source text
        pos: Offset just after the tag's ``<``
        hard_end: Exclusive scan limit

    Returns:
        Offset of the terminating ``>``, or -1 if there is none.
    """
    i = pos
    in_single = False
    in_double = False
    while i < hard_end:
        ch = text[i]
        if ch == "'" and not in_double:
            in_single = not in_single
            i += 1
            continue
        if ch == '"' and not in_single:
            in_double = not in_double
            i += 1
            continue
        if ch == "\\" and (in_single or in_double) and i + 1 < hard_end:
            i += 2
            continue
        if text.startswith(EXPRESSION_OPEN, i, hard_end):
            i = skip_expression(text, i + 2, hard_end)
            if i == -1:
                return -1
            continue
        if ch == ">" and not (in_single or in_double):
            return i
        i += 1
    return -1
