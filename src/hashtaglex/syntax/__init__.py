"""Hashtag syntax package.

Provides the scanner, content extractors, unescaper, synthesizer and the
dialect configuration they share. Separate from the search and matcher
facades so tooling can drive the scanner directly.

Python 3.13+.
"""

from .classifier import (
    find_lone_surrogate,
    has_lone_surrogate,
    is_strong_terminator,
    is_surrogate_pair_at,
)
from .config import (
    ANGLE_TERMINATED_CONFIG,
    DEFAULT_CONFIG,
    DOUBLING_CONFIG,
    LEGACY_CONFIG,
    HashtagConfig,
    get_dialect,
)
from .escapes import count_backslashes_before, is_unescaped_at, unescape
from .extractors import extract_unwrapped, extract_wrapped, find_wrapped_close
from .match import Extraction, HashtagMatch, RawMatch
from .punctuation import (
    ASCII_PUNCTUATION_TABLE,
    DEFAULT_PUNCTUATION_TABLE,
    SCRIPT_PUNCTUATION,
    build_punctuation_table,
    punctuation_table_for_locale,
    punctuation_table_for_script,
)
from .scanner import scan_hashtags
from .synthesizer import create_hashtag

__all__ = [
    "ANGLE_TERMINATED_CONFIG",
    "ASCII_PUNCTUATION_TABLE",
    "DEFAULT_CONFIG",
    "DEFAULT_PUNCTUATION_TABLE",
    "DOUBLING_CONFIG",
    "LEGACY_CONFIG",
    "SCRIPT_PUNCTUATION",
    "Extraction",
    "HashtagConfig",
    "HashtagMatch",
    "RawMatch",
    "build_punctuation_table",
    "count_backslashes_before",
    "create_hashtag",
    "extract_unwrapped",
    "extract_wrapped",
    "find_lone_surrogate",
    "find_wrapped_close",
    "get_dialect",
    "has_lone_surrogate",
    "is_strong_terminator",
    "is_surrogate_pair_at",
    "is_unescaped_at",
    "punctuation_table_for_locale",
    "punctuation_table_for_script",
    "scan_hashtags",
    "unescape",
]
