"""Dialect configuration for the hashtag engine.

Hashtag dialects differ in a handful of scanning rules. Rather than forking
the scanner, one engine reads a single frozen HashtagConfig; the dialects
observed in practice are provided as presets.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from hashtaglex.constants import BACKSLASH, HASH, WRAP_CLOSE, WRAP_OPEN
from hashtaglex.diagnostics import ErrorTemplate, HashtagConfigError
from hashtaglex.enums import PunctuationStrategy

from .classifier import is_strong_terminator, is_surrogate
from .punctuation import (
    ASCII_PUNCTUATION_TABLE,
    DEFAULT_PUNCTUATION_TABLE,
    punctuation_table_for_locale,
)

__all__ = [
    "ANGLE_TERMINATED_CONFIG",
    "DEFAULT_CONFIG",
    "DOUBLING_CONFIG",
    "LEGACY_CONFIG",
    "HashtagConfig",
    "get_dialect",
]

logger = logging.getLogger(__name__)

_RESERVED = frozenset((HASH, BACKSLASH, WRAP_OPEN, WRAP_CLOSE))


@dataclass(frozen=True, slots=True)
class HashtagConfig:
    """Immutable dialect configuration for scanning and synthesis.

    All fields have sensible defaults; ``HashtagConfig()`` is the canonical
    dialect. Pass an instance as ``config=`` to any scanning, matching or
    synthesis entry point. Synthesis honours the same flags, so text created
    under a config always scans back to itself under that config.

    Attributes:
        angle_brackets_terminate_unwrapped: ``<`` and ``>`` end unwrapped
            content (and count as terminators in punctuation lookahead).
            When False (default) they are regular content: ``#a<b`` is "a<b".
        punctuation_doubling_terminates: Two identical trailing punctuation
            marks end the hashtag after the first one regardless of what
            follows: ``#awesome!! Right?`` is "awesome!".
        normalize_wrapped_line_breaks: Unescaped CR, LF and CRLF in wrapped
            content collapse to one space, eating following spaces/tabs.
        escaped_angle_opens_wrapped: ``#\\<`` starts a wrapped hashtag just
            like ``#<``. When False (default) the escaped bracket is unwrapped
            content, which is how a text starting with ``<`` is written
            unwrapped.
        punctuation_table: Character to PunctuationStrategy map. Keys must be
            single characters other than whitespace, controls, surrogates,
            ``#``, ``\\``, ``<`` and ``>``.

    Example:
        >>> config = HashtagConfig(punctuation_doubling_terminates=True)
        >>> find_first("This is #awesome!! Right?", config=config).text
        'awesome!'
    """

    angle_brackets_terminate_unwrapped: bool = False
    punctuation_doubling_terminates: bool = False
    normalize_wrapped_line_breaks: bool = True
    escaped_angle_opens_wrapped: bool = False
    punctuation_table: Mapping[str, PunctuationStrategy] = field(
        default=DEFAULT_PUNCTUATION_TABLE, hash=False
    )

    def __post_init__(self) -> None:
        """Validate the punctuation table and freeze it.

        Raises:
            HashtagConfigError: If a key is not a single character, is
                reserved by the grammar, or maps to an unknown strategy.
        """
        table = self.punctuation_table
        for key, strategy in table.items():
            if not isinstance(key, str) or len(key) != 1:
                raise HashtagConfigError(ErrorTemplate.punctuation_key_invalid(key))
            if key in _RESERVED or is_strong_terminator(key) or is_surrogate(key):
                raise HashtagConfigError(ErrorTemplate.punctuation_key_reserved(key))
            if strategy not in (PunctuationStrategy.TRAILING, PunctuationStrategy.NONE):
                raise HashtagConfigError(
                    ErrorTemplate.punctuation_strategy_invalid(key, strategy)
                )
        if not isinstance(table, MappingProxyType):
            frozen = MappingProxyType(
                {key: PunctuationStrategy(value) for key, value in table.items()}
            )
            object.__setattr__(self, "punctuation_table", frozen)

    @classmethod
    def for_locale(
        cls, locale_code: str, *, strict: bool = False, **flags: bool
    ) -> HashtagConfig:
        """Build a config whose punctuation table follows a locale's script.

        Requires the ``babel`` extra.

        Args:
            locale_code: BCP-47 or POSIX locale code, e.g. "zh-CN"
            strict: Propagate unknown-locale errors instead of falling back
            **flags: Any boolean HashtagConfig field

        Returns:
            New HashtagConfig

        Example:
            >>> config = HashtagConfig.for_locale("zh-CN")
            >>> find_first("#标签。后面", config=config).text
            '标签'
        """
        table = punctuation_table_for_locale(locale_code, strict=strict)
        return cls(punctuation_table=table, **flags)


# Canonical dialect.
DEFAULT_CONFIG = HashtagConfig()

# First engine release: ASCII punctuation only, wrapped line breaks kept.
LEGACY_CONFIG = HashtagConfig(
    normalize_wrapped_line_breaks=False,
    punctuation_table=ASCII_PUNCTUATION_TABLE,
)

DOUBLING_CONFIG = HashtagConfig(punctuation_doubling_terminates=True)

ANGLE_TERMINATED_CONFIG = HashtagConfig(angle_brackets_terminate_unwrapped=True)

_DIALECTS: Mapping[str, HashtagConfig] = MappingProxyType(
    {
        "default": DEFAULT_CONFIG,
        "legacy": LEGACY_CONFIG,
        "doubling": DOUBLING_CONFIG,
        "angle_terminated": ANGLE_TERMINATED_CONFIG,
    }
)


def get_dialect(name: str) -> HashtagConfig:
    """Resolve a dialect preset by name.

    Args:
        name: One of "default", "legacy", "doubling", "angle_terminated"
            (case-insensitive; hyphens accepted)

    Raises:
        HashtagConfigError: If the name is unknown
    """
    key = name.strip().lower().replace("-", "_")
    config = _DIALECTS.get(key)
    if config is None:
        raise HashtagConfigError(ErrorTemplate.dialect_unknown(name, tuple(_DIALECTS)))
    logger.debug("Using hashtag dialect '%s'", key)
    return config
