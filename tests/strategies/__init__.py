"""Hypothesis strategies for HashtagLexEngine property-based testing.

Usage:
    from tests.strategies import hashtag_texts, dialect_configs
    from tests.strategies.hashtag import scan_inputs, lone_surrogates
"""

from .hashtag import (
    ESCAPED_ANGLE_CONFIG,
    GRAMMAR_CHARS,
    PUNCTUATION_CHARS,
    WHITESPACE_CHARS,
    custom_configs,
    dialect_configs,
    hashtag_texts,
    lone_surrogates,
    scan_inputs,
)

__all__ = [
    "ESCAPED_ANGLE_CONFIG",
    "GRAMMAR_CHARS",
    "PUNCTUATION_CHARS",
    "WHITESPACE_CHARS",
    "custom_configs",
    "dialect_configs",
    "hashtag_texts",
    "lone_surrogates",
    "scan_inputs",
]
