"""Escape parity tracking and unescaping.

A delimiter (the ``#`` trigger, the wrapped closing ``>``) is live when it is
preceded by an even number of backslashes, zero included. Raw hashtag
content keeps its escapes; unescape() turns it into logical text.

Python 3.13+. Zero external dependencies.
"""

from hashtaglex.constants import BACKSLASH, HORIZONTAL_WHITESPACE

__all__ = [
    "count_backslashes_before",
    "is_unescaped_at",
    "unescape",
]


def count_backslashes_before(text: str, pos: int) -> int:
    """Count consecutive backslashes immediately preceding pos.

    Iterative backward walk bounded by the length of the backslash run.

    Example:
        >>> count_backslashes_before("a\\\\\\\\#", 3)
        2
    """
    count = 0
    i = pos - 1
    while i >= 0 and text[i] == BACKSLASH:
        count += 1
        i -= 1
    return count


def is_unescaped_at(text: str, pos: int) -> bool:
    """Check whether the character at pos is live (not backslash-escaped).

    Example:
        >>> is_unescaped_at("\\\\#foo", 1)
        False
        >>> is_unescaped_at("\\\\\\\\#foo", 2)
        True
    """
    return count_backslashes_before(text, pos) % 2 == 0


def unescape(raw_content: str, *, normalize_line_breaks: bool = False) -> str:
    """Convert raw hashtag content to logical text.

    Single left-to-right pass:
        - ``\\X`` becomes ``X`` (any X, including a line break)
        - A lone trailing backslash is dropped
        - With normalize_line_breaks, each unescaped CR, LF or CRLF becomes
          one space and directly following spaces/tabs are consumed

    Args:
        raw_content: Content as found between the delimiters
        normalize_line_breaks: Collapse physical line breaks (wrapped form)

    Returns:
        Logical text

    Example:
        >>> unescape("foo\\\\#bar")
        'foo#bar'
        >>> unescape("a\\r\\n  b", normalize_line_breaks=True)
        'a b'
    """
    if BACKSLASH not in raw_content and not (
        normalize_line_breaks and ("\n" in raw_content or "\r" in raw_content)
    ):
        return raw_content

    parts: list[str] = []
    n = len(raw_content)
    i = 0
    while i < n:
        ch = raw_content[i]
        if ch == BACKSLASH:
            if i + 1 < n:
                parts.append(raw_content[i + 1])
            i += 2
            continue
        if normalize_line_breaks and ch in "\r\n":
            i += 2 if ch == "\r" and i + 1 < n and raw_content[i + 1] == "\n" else 1
            while i < n and raw_content[i] in HORIZONTAL_WHITESPACE:
                i += 1
            parts.append(" ")
            continue
        parts.append(ch)
        i += 1
    return "".join(parts)
