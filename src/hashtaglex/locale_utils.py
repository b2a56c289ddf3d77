"""Locale utilities for BCP-47 to POSIX conversion and script detection.

Centralizes locale format normalization used by the punctuation tables.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from hashtaglex.core.babel_compat import get_likely_subtags, require_babel

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_locale_script",
    "normalize_locale",
]

# Script assumed when CLDR has no likely-subtags entry for a locale.
_DEFAULT_SCRIPT = "Latn"


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "zh-Hant-TW")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "zh_Hant_TW")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("bo")  # Already normalized
        'bo'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    require_babel("get_babel_locale")
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=128)
def get_locale_script(locale_code: str) -> str:
    """Resolve the ISO 15924 writing script of a locale.

    Uses the explicit script subtag when present, otherwise the CLDR
    likely-subtags expansion of ``language_TERRITORY`` then ``language``.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Four-letter script code, e.g. "Latn", "Hans", "Tibt"

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> get_locale_script("zh-TW")
        'Hant'
        >>> get_locale_script("hy")
        'Armn'
    """
    locale = get_babel_locale(locale_code)
    if locale.script:
        return locale.script

    from babel.core import parse_locale  # noqa: PLC0415

    likely = get_likely_subtags()
    candidates = [locale.language]
    if locale.territory:
        candidates.insert(0, f"{locale.language}_{locale.territory}")
    for key in candidates:
        expanded = likely.get(key)
        if expanded:
            script = parse_locale(expanded)[2]
            if script:
                return script
    return _DEFAULT_SCRIPT
