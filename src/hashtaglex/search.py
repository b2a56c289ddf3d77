"""Cursor-free hashtag search.

Stateless functions over the scanner. Each call scans from scratch, so all
of them are re-entrant and safe to share across threads. Use HashtagPattern
(hashtaglex.matcher) when a RegExp-style cursor is wanted.

Python 3.13+.
"""

from collections.abc import Iterator
from typing import Literal

from hashtaglex.diagnostics import ErrorTemplate, HashtagConfigError
from hashtaglex.enums import HashtagType
from hashtaglex.syntax.config import DEFAULT_CONFIG, HashtagConfig
from hashtaglex.syntax.escapes import unescape
from hashtaglex.syntax.match import HashtagMatch, RawMatch
from hashtaglex.syntax.scanner import scan_hashtags

__all__ = [
    "ANY",
    "TypeFilter",
    "check_index",
    "find_all",
    "find_all_wrapped",
    "find_first",
    "find_hashtag",
    "iterate_hashtags",
    "resolve_type_filter",
    "to_hashtag_match",
]

ANY = "any"

type TypeFilter = HashtagType | Literal["any", "wrapped", "unwrapped"]


def resolve_type_filter(type: TypeFilter) -> HashtagType | None:  # noqa: A002
    """Normalize a type filter; None means any type.

    Raises:
        HashtagConfigError: If the filter is not "any", "wrapped" or "unwrapped"
    """
    if type == ANY:
        return None
    try:
        return HashtagType(type)
    except ValueError:
        raise HashtagConfigError(ErrorTemplate.filter_invalid(type)) from None


def check_index(name: str, value: int) -> int:
    """Reject negative start positions.

    Raises:
        HashtagConfigError: If value is negative
    """
    if value < 0:
        raise HashtagConfigError(ErrorTemplate.index_invalid(name, value))
    return value


def to_hashtag_match(text: str, item: RawMatch, config: HashtagConfig) -> HashtagMatch:
    """Promote a scanner result to a HashtagMatch with unescaped text."""
    normalize = config.normalize_wrapped_line_breaks and item.type == HashtagType.WRAPPED
    return HashtagMatch(
        type=item.type,
        start=item.start,
        end=item.end,
        raw=text[item.start : item.end],
        raw_content=item.raw_content,
        text=unescape(item.raw_content, normalize_line_breaks=normalize),
    )


def iterate_hashtags(
    text: str,
    *,
    type: TypeFilter = ANY,  # noqa: A002
    from_index: int = 0,
    config: HashtagConfig = DEFAULT_CONFIG,
) -> Iterator[HashtagMatch]:
    """Lazily iterate over hashtags in text.

    Finite; call again to restart. Filtering by type skips the other form
    without changing where scanning resumes, so ``#<a b>`` never yields
    an unwrapped ``#`` match.

    Args:
        text: Input text
        type: "any", "wrapped" or "unwrapped"
        from_index: Index to start searching at
        config: Dialect configuration

    Yields:
        HashtagMatch in order of start index

    Raises:
        HashtagConfigError: Invalid type filter or negative from_index
    """
    wanted = resolve_type_filter(type)
    check_index("from_index", from_index)
    return _iterate(text, wanted, from_index, config)


def _iterate(
    text: str, wanted: HashtagType | None, from_index: int, config: HashtagConfig
) -> Iterator[HashtagMatch]:
    for item in scan_hashtags(text, from_index, config=config):
        if wanted is None or item.type == wanted:
            yield to_hashtag_match(text, item, config)


def find_first(
    text: str,
    *,
    type: TypeFilter = ANY,  # noqa: A002
    from_index: int = 0,
    config: HashtagConfig = DEFAULT_CONFIG,
) -> HashtagMatch | None:
    """Find the first hashtag in text.

    Args:
        text: Input text
        type: "any", "wrapped" or "unwrapped"
        from_index: Index to start searching at
        config: Dialect configuration

    Returns:
        First HashtagMatch, or None when the text holds no hashtag

    Example:
        >>> m = find_first("Try #test\\\\#ing now")
        >>> m.raw_content, m.text
        ('test\\\\#ing', 'test#ing')
    """
    return next(iterate_hashtags(text, type=type, from_index=from_index, config=config), None)


find_hashtag = find_first


def find_all(
    text: str,
    *,
    type: TypeFilter = ANY,  # noqa: A002
    from_index: int = 0,
    config: HashtagConfig = DEFAULT_CONFIG,
) -> list[HashtagMatch]:
    """Find every hashtag in text, in order of start index."""
    return list(iterate_hashtags(text, type=type, from_index=from_index, config=config))


def find_all_wrapped(
    text: str, *, config: HashtagConfig = DEFAULT_CONFIG
) -> list[HashtagMatch]:
    """Find every wrapped (``#<...>``) hashtag in text."""
    return find_all(text, type=HashtagType.WRAPPED, config=config)
