"""Character classification for the hashtag scanner.

Pure, stateless predicates over single characters and surrogate structure.
Every function is O(1).

Surrogate Model:
    A Python str is a sequence of code points, so astral characters such as
    emoji are a single element. A str can still carry raw UTF-16 surrogates
    (text decoded with ``surrogatepass``, or built from code units). A high
    surrogate directly followed by a low surrogate is one logical character
    of width 2; any other surrogate is a lone surrogate and never counts as
    hashtag content.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

from hashtaglex.constants import (
    C1_CONTROL_END,
    C1_CONTROL_START,
    HIGH_SURROGATE_END,
    HIGH_SURROGATE_START,
    LINE_BREAKS,
    LOW_SURROGATE_END,
    LOW_SURROGATE_START,
    STRONG_TERMINATOR_MAX,
    WRAP_CLOSE,
    WRAP_OPEN,
)
from hashtaglex.enums import PunctuationStrategy

__all__ = [
    "char_width_at",
    "find_lone_surrogate",
    "has_lone_surrogate",
    "is_angle_bracket",
    "is_high_surrogate",
    "is_line_break",
    "is_lone_surrogate_at",
    "is_low_surrogate",
    "is_strong_terminator",
    "is_surrogate",
    "is_surrogate_pair_at",
    "punctuation_strategy_of",
]


def is_strong_terminator(ch: str) -> bool:
    """Check for whitespace/control characters that always end unwrapped content.

    Covers U+0000-U+0020 (C0 controls and space) and U+007F-U+009F
    (DEL and C1 controls).

    Example:
        >>> is_strong_terminator(" "), is_strong_terminator("\\x85"), is_strong_terminator("a")
        (True, True, False)
    """
    code = ord(ch)
    return code <= STRONG_TERMINATOR_MAX or C1_CONTROL_START <= code <= C1_CONTROL_END


def is_angle_bracket(ch: str) -> bool:
    """Check for ``<`` or ``>``."""
    return ch in (WRAP_OPEN, WRAP_CLOSE)


def is_line_break(ch: str) -> bool:
    """Check for CR or LF."""
    return ch in LINE_BREAKS


def is_high_surrogate(ch: str) -> bool:
    # High Surrogate Block (0xd800-0xdbff)
    return HIGH_SURROGATE_START <= ord(ch) <= HIGH_SURROGATE_END


def is_low_surrogate(ch: str) -> bool:
    # Low Surrogate Block (0xdc00-0xdfff)
    return LOW_SURROGATE_START <= ord(ch) <= LOW_SURROGATE_END


def is_surrogate(ch: str) -> bool:
    return HIGH_SURROGATE_START <= ord(ch) <= LOW_SURROGATE_END


def is_surrogate_pair_at(text: str, pos: int) -> bool:
    """Check for a valid high+low surrogate pair starting at pos."""
    if pos + 1 >= len(text):
        return False
    return is_high_surrogate(text[pos]) and is_low_surrogate(text[pos + 1])


def is_lone_surrogate_at(text: str, pos: int) -> bool:
    """Check whether text[pos] is a surrogate that is not part of a valid pair.

    A low surrogate is judged from the left: callers advance over whole
    pairs, so a low surrogate reached directly is always unpaired.
    """
    ch = text[pos]
    if is_high_surrogate(ch):
        return not is_surrogate_pair_at(text, pos)
    return is_low_surrogate(ch)


def char_width_at(text: str, pos: int) -> int:
    """Width in str elements of the logical character at pos (1 or 2)."""
    return 2 if is_surrogate_pair_at(text, pos) else 1


def find_lone_surrogate(text: str, start: int = 0, end: int | None = None) -> int:
    """Find the first lone surrogate in text[start:end].

    Returns:
        Index of the lone surrogate, or -1 when there is none

    Example:
        >>> find_lone_surrogate("ab\\ud800c")
        2
        >>> find_lone_surrogate("a\\ud83d\\ude00b")  # valid pair
        -1
    """
    stop = len(text) if end is None else end
    pos = start
    while pos < stop:
        ch = text[pos]
        if is_surrogate(ch):
            if is_high_surrogate(ch) and pos + 1 < stop and is_low_surrogate(text[pos + 1]):
                pos += 2
                continue
            return pos
        pos += 1
    return -1


def has_lone_surrogate(text: str, start: int = 0, end: int | None = None) -> bool:
    """Check whether text[start:end] holds any lone surrogate."""
    return find_lone_surrogate(text, start, end) >= 0


def punctuation_strategy_of(
    ch: str, table: Mapping[str, PunctuationStrategy]
) -> PunctuationStrategy | None:
    """Look up the termination strategy of a punctuation character.

    Returns:
        The strategy, or None when ch is not punctuation in this table
    """
    return table.get(ch)
