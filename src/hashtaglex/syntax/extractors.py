"""Content extractors for wrapped and unwrapped hashtags.

Both extractors take the input text and the index where content begins,
and return an Extraction or None. None is a normal outcome that tells the
scanner to advance and retry; extractors never raise on malformed text.

Python 3.13+. Zero external dependencies.
"""

from hashtaglex.constants import BACKSLASH, HASH, WRAP_CLOSE
from hashtaglex.enums import PunctuationStrategy

from .classifier import (
    char_width_at,
    has_lone_surrogate,
    is_angle_bracket,
    is_line_break,
    is_lone_surrogate_at,
    is_strong_terminator,
)
from .config import DEFAULT_CONFIG, HashtagConfig
from .escapes import is_unescaped_at
from .match import Extraction

__all__ = ["extract_unwrapped", "extract_wrapped", "find_wrapped_close"]


def find_wrapped_close(text: str, start: int) -> int:
    """Find the first live ``>`` at or after start.

    Liveness is judged on the whole text, so the answer for a later start
    is the same index whenever it is still at or after that start.

    Returns:
        Index of the closing bracket, or -1 when there is none
    """
    close = text.find(WRAP_CLOSE, start)
    while close != -1 and not is_unescaped_at(text, close):
        close = text.find(WRAP_CLOSE, close + 1)
    return close


def extract_wrapped(text: str, content_start: int) -> Extraction | None:
    """Extract wrapped content up to the first live ``>``.

    A ``>`` preceded by an odd number of backslashes is escaped and skipped.
    A literal ``<`` inside the content needs no escape.

    Args:
        text: Input text
        content_start: Index right after the opening ``<``

    Returns:
        Extraction ending after the closing ``>``, or None when no live
        ``>`` exists, the content is empty, or it holds a lone surrogate

    Example:
        >>> extract_wrapped("#<foo\\\\>bar> x", 2)
        Extraction(end=11, raw_content='foo\\\\>bar')
    """
    close = find_wrapped_close(text, content_start)
    if close == -1 or close == content_start:
        return None
    if has_lone_surrogate(text, content_start, close):
        return None
    return Extraction(end=close + 1, raw_content=text[content_start:close])


def _ends_before_punctuation(
    text: str, pos: int, config: HashtagConfig
) -> bool:
    """Decide whether the trailing punctuation at pos terminates the hashtag.

    Termination happens at end of input, or before a strong terminator, any
    other punctuation, or (angle-terminated dialect) an angle bracket.
    """
    nxt = pos + 1
    if nxt >= len(text):
        return True
    ch = text[nxt]
    if is_strong_terminator(ch) or ch in config.punctuation_table:
        return True
    return config.angle_brackets_terminate_unwrapped and is_angle_bracket(ch)


def extract_unwrapped(
    text: str, content_start: int, config: HashtagConfig = DEFAULT_CONFIG
) -> Extraction | None:
    """Greedily extract unwrapped content.

    Rules, applied left to right:
        - ``\\X`` is an escape pair and always continues (a surrogate pair
          counts as one X). A trailing backslash at end of input, or one
          followed by a line break, is kept and ends the hashtag: line
          breaks cannot be escaped in unwrapped form.
        - Strong terminators and a live ``#`` stop the hashtag, as do angle
          brackets in the angle-terminated dialect.
        - TRAILING punctuation is kept unless lookahead says it ends the
          hashtag; in the doubling dialect a repeated mark keeps the first
          and stops before the second.
        - NONE punctuation stops the hashtag.
        - A lone surrogate rejects the whole candidate.

    Args:
        text: Input text
        content_start: Index right after the ``#``
        config: Dialect configuration

    Returns:
        Extraction, or None when the content would be empty or a lone
        surrogate was met

    Example:
        >>> extract_unwrapped("#v2.0 rocks", 1)
        Extraction(end=5, raw_content='v2.0')
        >>> extract_unwrapped("#foo. bar", 1)
        Extraction(end=4, raw_content='foo')
    """
    n = len(text)
    table = config.punctuation_table
    angle_terminates = config.angle_brackets_terminate_unwrapped
    doubling = config.punctuation_doubling_terminates
    pos = content_start

    while pos < n:
        ch = text[pos]

        if ch == BACKSLASH:
            if pos + 1 >= n:
                pos += 1
                break
            if is_line_break(text[pos + 1]):
                pos += 1
                break
            if is_lone_surrogate_at(text, pos + 1):
                return None
            pos += 1 + char_width_at(text, pos + 1)
            continue

        if is_strong_terminator(ch) or ch == HASH:
            break
        if angle_terminates and is_angle_bracket(ch):
            break

        strategy = table.get(ch)
        if strategy == PunctuationStrategy.NONE:
            break
        if strategy == PunctuationStrategy.TRAILING:
            if doubling and pos + 1 < n and text[pos + 1] == ch:
                pos += 1
                break
            if _ends_before_punctuation(text, pos, config):
                break
            pos += 1
            continue

        if is_lone_surrogate_at(text, pos):
            return None
        pos += char_width_at(text, pos)

    if pos == content_start:
        return None
    return Extraction(end=pos, raw_content=text[content_start:pos])
