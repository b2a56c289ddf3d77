"""Tests for locale-aware punctuation tables (Babel/CLDR).

Covers locale normalization, script detection through CLDR likely subtags,
the per-script tables, and the warning fallback for unknown locales.

Python 3.13+.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from babel.core import UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from hashtaglex import HashtagConfig, PunctuationStrategy, find_first, punctuation_table_for_locale
from hashtaglex.core.babel_compat import (
    BabelImportError,
    get_likely_subtags,
    get_unknown_locale_error,
    is_babel_available,
    require_babel,
)
from hashtaglex.locale_utils import get_babel_locale, get_locale_script, normalize_locale
from hashtaglex.syntax.punctuation import (
    ASCII_PUNCTUATION_TABLE,
    DEFAULT_PUNCTUATION_TABLE,
    SCRIPT_PUNCTUATION,
    build_punctuation_table,
    punctuation_table_for_script,
)


class TestNormalizeLocale:
    """Test normalize_locale function."""

    def test_bcp47_to_posix(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        assert normalize_locale("en_US") == "en_US"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hant-TW") == "zh_Hant_TW"

    def test_whitespace_stripped(self) -> None:
        assert normalize_locale("  ja-JP ") == "ja_JP"

    @given(st.from_regex(r"[a-z]{2,3}(-[A-Z]{2})?", fullmatch=True))
    def test_no_hyphen_survives(self, code: str) -> None:
        """PROPERTY: normalized codes never contain hyphens."""
        event(f"has_territory={'-' in code}")
        assert "-" not in normalize_locale(code)


class TestLocaleScript:
    """Test script detection via Babel and CLDR likely subtags."""

    @pytest.mark.parametrize(
        ("locale_code", "script"),
        [
            ("en-US", "Latn"),
            ("ru", "Cyrl"),
            ("el", "Grek"),
            ("hy", "Armn"),
            ("he", "Hebr"),
            ("ar-EG", "Arab"),
            ("hi", "Deva"),
            ("ka", "Geor"),
            ("am", "Ethi"),
            ("ja", "Jpan"),
            ("zh-CN", "Hans"),
            ("zh-Hant-TW", "Hant"),
            ("bo", "Tibt"),
        ],
    )
    def test_script(self, locale_code: str, script: str) -> None:
        assert get_locale_script(locale_code) == script

    def test_babel_locale_cached(self) -> None:
        first = get_babel_locale("de-DE")
        assert get_babel_locale("de-DE") is first
        assert first.language == "de"

    def test_likely_subtags_available(self) -> None:
        assert get_likely_subtags()["ja"].startswith("ja_Jpan")


class TestScriptTables:
    """Test the built-in per-script punctuation tables."""

    def test_ascii_table(self) -> None:
        assert set(ASCII_PUNCTUATION_TABLE) == set(".,;:!?")
        assert all(s is PunctuationStrategy.TRAILING for s in ASCII_PUNCTUATION_TABLE.values())

    def test_default_is_union(self) -> None:
        for additions in SCRIPT_PUNCTUATION.values():
            for ch, strategy in additions.items():
                assert DEFAULT_PUNCTUATION_TABLE[ch] is strategy

    def test_cjk_and_tibetan_are_immediate(self) -> None:
        for ch in "、。！，．：；？｡､":
            assert DEFAULT_PUNCTUATION_TABLE[ch] is PunctuationStrategy.NONE
        for code in (*range(0x0F0D, 0x0F13), 0x0F14):
            assert DEFAULT_PUNCTUATION_TABLE[chr(code)] is PunctuationStrategy.NONE

    def test_unlisted_script_gets_ascii(self) -> None:
        assert punctuation_table_for_script("Kore") is ASCII_PUNCTUATION_TABLE

    def test_script_lookup_case_insensitive(self) -> None:
        assert punctuation_table_for_script("arab") == punctuation_table_for_script("Arab")
        assert "،" in punctuation_table_for_script("ARAB")

    def test_build_none_wins(self) -> None:
        table = build_punctuation_table(trailing=".", none=".")
        assert table["."] is PunctuationStrategy.NONE

    def test_tables_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_PUNCTUATION_TABLE["~"] = PunctuationStrategy.NONE  # type: ignore[index]


class TestPunctuationTableForLocale:
    """Test locale to punctuation table resolution."""

    def test_japanese(self) -> None:
        table = punctuation_table_for_locale("ja-JP")
        assert table["。"] is PunctuationStrategy.NONE
        assert table["."] is PunctuationStrategy.TRAILING
        assert "،" not in table

    def test_english(self) -> None:
        table = punctuation_table_for_locale("en")
        assert table["…"] is PunctuationStrategy.TRAILING
        assert "。" not in table

    def test_arabic(self) -> None:
        table = punctuation_table_for_locale("ar_EG")
        assert table["؟"] is PunctuationStrategy.TRAILING

    def test_cached(self) -> None:
        assert punctuation_table_for_locale("hy") is punctuation_table_for_locale("hy")

    def test_unknown_locale_falls_back_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="hashtaglex.syntax.punctuation"):
            table = punctuation_table_for_locale("xx-YY")
        assert table is DEFAULT_PUNCTUATION_TABLE
        assert "xx-YY" in caplog.text
        assert "default punctuation table" in caplog.text

    def test_malformed_locale_falls_back(self) -> None:
        assert punctuation_table_for_locale("not a locale!") is DEFAULT_PUNCTUATION_TABLE

    def test_strict_propagates_unknown_locale(self) -> None:
        with pytest.raises(UnknownLocaleError):
            punctuation_table_for_locale("xx-YY", strict=True)

    def test_strict_propagates_malformed_locale(self) -> None:
        with pytest.raises(ValueError):
            punctuation_table_for_locale("not a locale!", strict=True)


class TestConfigForLocale:
    """Test HashtagConfig.for_locale."""

    def test_chinese_terminates_at_ideographic_stop(self) -> None:
        config = HashtagConfig.for_locale("zh-CN")
        match = find_first("#标签。后面", config=config)
        assert match is not None
        assert match.text == "标签"

    def test_english_keeps_ideographic_stop(self) -> None:
        config = HashtagConfig.for_locale("en-US")
        match = find_first("#标签。后面", config=config)
        assert match is not None
        assert match.text == "标签。后面"

    def test_flags_forwarded(self) -> None:
        config = HashtagConfig.for_locale("en", punctuation_doubling_terminates=True)
        assert config.punctuation_doubling_terminates is True
        match = find_first("#wow!! x", config=config)
        assert match is not None
        assert match.text == "wow!"


class TestBabelCompat:
    """Test the optional-dependency guard."""

    def test_babel_available_in_test_environment(self) -> None:
        assert is_babel_available() is True
        require_babel("test_feature")

    def test_unknown_locale_error_class(self) -> None:
        assert get_unknown_locale_error() is UnknownLocaleError

    def test_error_message_has_install_hint(self) -> None:
        error = BabelImportError("punctuation_table_for_locale")
        assert "pip install hashtaglex[babel]" in str(error)
        assert error.feature == "punctuation_table_for_locale"
        assert isinstance(error, ImportError)

    def test_require_babel_raises_when_missing(self) -> None:
        with (
            patch("hashtaglex.core.babel_compat._check_babel_available", return_value=False),
            pytest.raises(BabelImportError, match="get_likely_subtags"),
        ):
            get_likely_subtags()
