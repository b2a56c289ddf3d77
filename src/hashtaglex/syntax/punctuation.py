"""Punctuation tables for unwrapped hashtag termination.

Each punctuation mark carries a PunctuationStrategy:

- TRAILING marks (``.`` ``,`` ``!`` ...) end an unwrapped hashtag only when
  followed by whitespace, more punctuation, or end of input, so ``#v2.0``
  keeps its dot while ``#foo. bar`` drops it.
- NONE marks (CJK full-width, Tibetan shad) end it immediately: those
  scripts put no space after punctuation, so lookahead would swallow the
  following word.

Tables are read-only mappings from a single character to its strategy.
Locale-specific tables are resolved through Babel's CLDR data when the
``babel`` extra is installed.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping
from types import MappingProxyType

from hashtaglex.diagnostics import ErrorTemplate
from hashtaglex.enums import PunctuationStrategy
from hashtaglex.locale_utils import get_locale_script, normalize_locale

__all__ = [
    "ASCII_PUNCTUATION_TABLE",
    "DEFAULT_PUNCTUATION_TABLE",
    "SCRIPT_PUNCTUATION",
    "build_punctuation_table",
    "punctuation_table_for_locale",
    "punctuation_table_for_script",
]

logger = logging.getLogger(__name__)

_TRAILING = PunctuationStrategy.TRAILING
_NONE = PunctuationStrategy.NONE

# Full stop, comma, semicolon, colon, exclamation mark, question mark.
# Shared by Latin, Cyrillic and most space-separated scripts.
_ASCII_MARKS = ".,;:!?"

_LATIN_EXTRA = "…"  # HORIZONTAL ELLIPSIS

_GREEK = (
    ";"  # GREEK QUESTION MARK
    "·"  # GREEK ANO TELEIA
)

_ARMENIAN = (
    "՜"  # ARMENIAN EXCLAMATION MARK
    "՝"  # ARMENIAN COMMA
    "՞"  # ARMENIAN QUESTION MARK
    "։"  # ARMENIAN FULL STOP
)

_HEBREW = "׃"  # HEBREW PUNCTUATION SOF PASUQ

_ARABIC = (
    "،"  # ARABIC COMMA
    "؛"  # ARABIC SEMICOLON
    "؟"  # ARABIC QUESTION MARK
    "۔"  # ARABIC FULL STOP
)

_INDIC = (
    "।"  # DEVANAGARI DANDA
    "॥"  # DEVANAGARI DOUBLE DANDA
)

_GEORGIAN = "჻"  # GEORGIAN PARAGRAPH SEPARATOR

_ETHIOPIC = (
    "።"  # ETHIOPIC FULL STOP
    "፣"  # ETHIOPIC COMMA
    "፤"  # ETHIOPIC SEMICOLON
    "፥"  # ETHIOPIC COLON
    "፦"  # ETHIOPIC PREFACE COLON
    "፧"  # ETHIOPIC QUESTION MARK
    "፨"  # ETHIOPIC PARAGRAPH SEPARATOR
)

_CJK = (
    "、"  # IDEOGRAPHIC COMMA
    "。"  # IDEOGRAPHIC FULL STOP
    "！"  # FULLWIDTH EXCLAMATION MARK
    "，"  # FULLWIDTH COMMA
    "．"  # FULLWIDTH FULL STOP
    "："  # FULLWIDTH COLON
    "；"  # FULLWIDTH SEMICOLON
    "？"  # FULLWIDTH QUESTION MARK
    "｡"  # HALFWIDTH IDEOGRAPHIC FULL STOP
    "､"  # HALFWIDTH IDEOGRAPHIC COMMA
)

_TIBETAN = (
    "།"  # TIBETAN MARK SHAD
    "༎"  # TIBETAN MARK NYIS SHAD
    "༏"  # TIBETAN MARK TSHEG SHAD
    "༐"  # TIBETAN MARK NYIS TSHEG SHAD
    "༑"  # TIBETAN MARK RIN CHEN SPUNGS SHAD
    "༒"  # TIBETAN MARK RGYA GRAM SHAD
    "༔"  # TIBETAN MARK GTER TSHEG
)


def build_punctuation_table(
    trailing: str = "", none: str = ""
) -> Mapping[str, PunctuationStrategy]:
    """Build a read-only punctuation table.

    Args:
        trailing: Characters terminating via lookahead
        none: Characters terminating immediately (wins over trailing)

    Returns:
        Immutable mapping of character to strategy

    Example:
        >>> table = build_punctuation_table(trailing=".,", none="。")
        >>> table["."]
        <PunctuationStrategy.TRAILING: 'trailing'>
    """
    table = dict.fromkeys(trailing, _TRAILING)
    table.update(dict.fromkeys(none, _NONE))
    return MappingProxyType(table)


# Script-specific additions keyed by ISO 15924 code. Scripts absent from
# this map (Latn, Cyrl, Kore, ...) use the ASCII marks only.
SCRIPT_PUNCTUATION: Mapping[str, Mapping[str, PunctuationStrategy]] = MappingProxyType(
    {
        "Latn": build_punctuation_table(trailing=_LATIN_EXTRA),
        "Cyrl": build_punctuation_table(trailing=_LATIN_EXTRA),
        "Grek": build_punctuation_table(trailing=_GREEK + _LATIN_EXTRA),
        "Armn": build_punctuation_table(trailing=_ARMENIAN),
        "Hebr": build_punctuation_table(trailing=_HEBREW),
        "Arab": build_punctuation_table(trailing=_ARABIC),
        "Deva": build_punctuation_table(trailing=_INDIC),
        "Beng": build_punctuation_table(trailing=_INDIC),
        "Guru": build_punctuation_table(trailing=_INDIC),
        "Gujr": build_punctuation_table(trailing=_INDIC),
        "Orya": build_punctuation_table(trailing=_INDIC),
        "Taml": build_punctuation_table(trailing=_INDIC),
        "Telu": build_punctuation_table(trailing=_INDIC),
        "Knda": build_punctuation_table(trailing=_INDIC),
        "Mlym": build_punctuation_table(trailing=_INDIC),
        "Geor": build_punctuation_table(trailing=_GEORGIAN),
        "Ethi": build_punctuation_table(trailing=_ETHIOPIC),
        "Hans": build_punctuation_table(none=_CJK),
        "Hant": build_punctuation_table(none=_CJK),
        "Hani": build_punctuation_table(none=_CJK),
        "Jpan": build_punctuation_table(none=_CJK),
        "Tibt": build_punctuation_table(none=_TIBETAN),
    }
)

# The six ASCII marks only: the behaviour of the first engine release.
ASCII_PUNCTUATION_TABLE: Mapping[str, PunctuationStrategy] = build_punctuation_table(
    trailing=_ASCII_MARKS
)

# Union of every script table. Used when no locale is given.
DEFAULT_PUNCTUATION_TABLE: Mapping[str, PunctuationStrategy] = build_punctuation_table(
    trailing=(
        _ASCII_MARKS
        + _LATIN_EXTRA
        + _GREEK
        + _ARMENIAN
        + _HEBREW
        + _ARABIC
        + _INDIC
        + _GEORGIAN
        + _ETHIOPIC
    ),
    none=_CJK + _TIBETAN,
)


def punctuation_table_for_script(script: str) -> Mapping[str, PunctuationStrategy]:
    """Get the ASCII marks plus the additions of one writing script.

    Args:
        script: ISO 15924 code, e.g. "Arab" (case-insensitive)

    Returns:
        Immutable punctuation table
    """
    additions = SCRIPT_PUNCTUATION.get(script.title())
    if not additions:
        return ASCII_PUNCTUATION_TABLE
    return MappingProxyType({**ASCII_PUNCTUATION_TABLE, **additions})


@functools.lru_cache(maxsize=128)
def _table_for_normalized_locale(locale_code: str) -> Mapping[str, PunctuationStrategy]:
    script = get_locale_script(locale_code)
    logger.debug("Locale '%s' resolved to script %s", locale_code, script)
    return punctuation_table_for_script(script)


def punctuation_table_for_locale(
    locale_code: str, *, strict: bool = False
) -> Mapping[str, PunctuationStrategy]:
    """Resolve the punctuation table for a locale via CLDR script data.

    Requires the ``babel`` extra. Results are cached per normalized locale.

    Args:
        locale_code: BCP-47 or POSIX locale code, e.g. "zh-CN", "ar_EG"
        strict: If True, propagate locale errors instead of falling back

    Returns:
        ASCII marks plus the locale script's marks. Unknown or malformed
        locales get DEFAULT_PUNCTUATION_TABLE (with a warning logged)
        unless strict is set.

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: Unknown locale and strict=True
        ValueError: Malformed locale code and strict=True

    Example:
        >>> table = punctuation_table_for_locale("ja-JP")
        >>> table["。"]
        <PunctuationStrategy.NONE: 'none'>
    """
    from hashtaglex.core.babel_compat import get_unknown_locale_error  # noqa: PLC0415

    unknown_locale_error = get_unknown_locale_error()
    normalized = normalize_locale(locale_code)
    try:
        return _table_for_normalized_locale(normalized)
    except (unknown_locale_error, ValueError) as e:
        if strict:
            raise
        diagnostic = ErrorTemplate.locale_unknown(locale_code, str(e))
        logger.warning("%s. %s", diagnostic.message, diagnostic.hint)
        return DEFAULT_PUNCTUATION_TABLE
