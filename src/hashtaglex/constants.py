"""Shared constants for HashtagLexEngine.

This module provides centralized constants used across the syntax layer
and the matcher facade. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Delimiters: Characters with structural meaning in the hashtag grammar
- Code point ranges: Strong terminators and UTF-16 surrogates
- Pattern metadata: RegExp-like facade identity
- Fallback strings: Sentinel results for invalid input

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Delimiters
    "HASH",
    "BACKSLASH",
    "WRAP_OPEN",
    "WRAP_CLOSE",
    "LINE_BREAKS",
    "HORIZONTAL_WHITESPACE",
    # Code point ranges
    "STRONG_TERMINATOR_MAX",
    "C1_CONTROL_START",
    "C1_CONTROL_END",
    "HIGH_SURROGATE_START",
    "HIGH_SURROGATE_END",
    "LOW_SURROGATE_START",
    "LOW_SURROGATE_END",
    # Pattern metadata
    "PATTERN_SOURCE",
    "FLAG_GLOBAL",
    "FLAG_STICKY",
    # Fallback strings
    "SYNTHESIS_INVALID",
]

# ============================================================================
# DELIMITERS
# ============================================================================

# Hashtag trigger (U+0023). Escapable with a preceding backslash.
HASH: str = "#"

# Escape introducer (U+005C). Escape parity decides whether a delimiter is live.
BACKSLASH: str = "\\"

# Wrapped form delimiters: #<content>
WRAP_OPEN: str = "<"
WRAP_CLOSE: str = ">"

# Physical line break characters. CRLF is a two-character break.
LINE_BREAKS: str = "\r\n"

# Whitespace consumed after a normalized line break inside wrapped content.
HORIZONTAL_WHITESPACE: str = " \t"

# ============================================================================
# CODE POINT RANGES
# ============================================================================

# Strong terminators: U+0000-U+0020 (C0 controls + space) and U+007F-U+009F
# (DEL + C1 controls). These always end unwrapped content.
STRONG_TERMINATOR_MAX: int = 0x20
C1_CONTROL_START: int = 0x7F
C1_CONTROL_END: int = 0x9F

# UTF-16 surrogate blocks. A Python str only holds these when text was decoded
# with surrogatepass/surrogateescape or built from raw code units.
HIGH_SURROGATE_START: int = 0xD800
HIGH_SURROGATE_END: int = 0xDBFF
LOW_SURROGATE_START: int = 0xDC00
LOW_SURROGATE_END: int = 0xDFFF

# ============================================================================
# PATTERN METADATA
# ============================================================================

# Value of HashtagPattern.source, mirroring RegExp.prototype.source.
PATTERN_SOURCE: str = "hashtag"

FLAG_GLOBAL: str = "g"
FLAG_STICKY: str = "y"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Returned by create_hashtag() for empty text or text with a lone surrogate.
# Callers must check for it before treating the result as a hashtag.
SYNTHESIS_INVALID: str = ""
