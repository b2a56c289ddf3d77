"""HashtagLexEngine - hashtag scanning, unescaping and synthesis.

Recognizes two hashtag forms in free text: unwrapped ``#tag`` and wrapped
``#<tag with spaces>``. Backslash escapes, trailing punctuation, UTF-16
surrogates and per-locale punctuation are handled by one configurable
scanner; create_hashtag() produces text that scans back to the original.

Public API:
    find_first / find_hashtag - First hashtag in a text
    find_all / find_all_wrapped - Every hashtag in a text
    iterate_hashtags - Lazy iteration
    create_hashtag - Synthesize the canonical hashtag for a text
    unescape - Raw hashtag content to logical text
    HashtagPattern / hashtag_pattern - RegExp-style matcher with a cursor
    HashtagConfig - Dialect configuration (presets DEFAULT_CONFIG, ...)

Exceptions:
    HashtagError - Base exception class
    HashtagConfigError - Invalid configuration or matcher option
    HashtagSynthesisError - Strict synthesis of invalid text

Submodules:
    hashtaglex.syntax - Scanner, extractors and punctuation tables
    hashtaglex.diagnostics - Error types and diagnostic formatting
    hashtaglex.locale_utils - Locale normalization and script detection (Babel)
"""

from .diagnostics import HashtagConfigError, HashtagError, HashtagSynthesisError
from .enums import CaptureMode, HashtagType, PunctuationStrategy
from .matcher import HashtagExecResult, HashtagPattern, hashtag_pattern
from .search import find_all, find_all_wrapped, find_first, find_hashtag, iterate_hashtags
from .syntax import (
    ANGLE_TERMINATED_CONFIG,
    DEFAULT_CONFIG,
    DOUBLING_CONFIG,
    LEGACY_CONFIG,
    HashtagConfig,
    HashtagMatch,
    RawMatch,
    create_hashtag,
    get_dialect,
    punctuation_table_for_locale,
    unescape,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("hashtaglex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ANGLE_TERMINATED_CONFIG",
    "DEFAULT_CONFIG",
    "DOUBLING_CONFIG",
    "LEGACY_CONFIG",
    "CaptureMode",
    "HashtagConfig",
    "HashtagConfigError",
    "HashtagError",
    "HashtagExecResult",
    "HashtagMatch",
    "HashtagPattern",
    "HashtagSynthesisError",
    "HashtagType",
    "PunctuationStrategy",
    "RawMatch",
    "__version__",
    "create_hashtag",
    "find_all",
    "find_all_wrapped",
    "find_first",
    "find_hashtag",
    "get_dialect",
    "hashtag_pattern",
    "iterate_hashtags",
    "punctuation_table_for_locale",
    "unescape",
]
