"""Enumerations for HashtagLexEngine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so ``HashtagType.WRAPPED == "wrapped"``
and callers may pass plain strings wherever a member is accepted.

Python 3.13+.
"""

from enum import StrEnum


class HashtagType(StrEnum):
    """Syntactic form of a hashtag.

    StrEnum provides automatic string conversion: str(HashtagType.WRAPPED) == "wrapped"
    """

    UNWRAPPED = "unwrapped"
    """Delimiter-free form: #content"""

    WRAPPED = "wrapped"
    """Angle-bracket form: #<content with spaces>"""


class PunctuationStrategy(StrEnum):
    """How a punctuation character terminates unwrapped content.

    StrEnum provides automatic string conversion: str(PunctuationStrategy.NONE) == "none"
    """

    TRAILING = "trailing"
    """Terminates only when followed by whitespace, punctuation, or end of input: #v2.0 vs #foo."""

    NONE = "none"
    """Always terminates when unescaped (CJK full-width and Tibetan marks)."""


class CaptureMode(StrEnum):
    """Payload placed in group 1 of a HashtagPattern exec result.

    StrEnum provides automatic string conversion: str(CaptureMode.TEXT) == "text"
    """

    RAW_CONTENT = "raw_content"
    """Content with backslash escapes retained: test\\#ing"""

    TEXT = "text"
    """Unescaped logical text: test#ing"""


__all__ = [
    "CaptureMode",
    "HashtagType",
    "PunctuationStrategy",
]
