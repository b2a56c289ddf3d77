"""Tests for HashtagConfig validation, presets and dialect lookup."""

from __future__ import annotations

import logging
from types import MappingProxyType

import pytest

from hashtaglex import (
    ANGLE_TERMINATED_CONFIG,
    DEFAULT_CONFIG,
    DOUBLING_CONFIG,
    LEGACY_CONFIG,
    HashtagConfig,
    HashtagConfigError,
    PunctuationStrategy,
    find_first,
    get_dialect,
)
from hashtaglex.diagnostics import DiagnosticCode
from hashtaglex.syntax.punctuation import ASCII_PUNCTUATION_TABLE, DEFAULT_PUNCTUATION_TABLE


class TestDefaults:
    """Test the canonical dialect."""

    def test_default_flags(self) -> None:
        config = HashtagConfig()
        assert config.angle_brackets_terminate_unwrapped is False
        assert config.punctuation_doubling_terminates is False
        assert config.normalize_wrapped_line_breaks is True
        assert config.escaped_angle_opens_wrapped is False
        assert config.punctuation_table is DEFAULT_PUNCTUATION_TABLE

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.punctuation_doubling_terminates = True  # type: ignore[misc]

    def test_equal_and_hashable(self) -> None:
        assert HashtagConfig() == DEFAULT_CONFIG
        assert hash(HashtagConfig()) == hash(DEFAULT_CONFIG)


class TestPresets:
    """Test the preset dialects."""

    def test_legacy(self) -> None:
        assert LEGACY_CONFIG.normalize_wrapped_line_breaks is False
        assert LEGACY_CONFIG.punctuation_table is ASCII_PUNCTUATION_TABLE

    def test_doubling(self) -> None:
        assert DOUBLING_CONFIG.punctuation_doubling_terminates is True

    def test_angle_terminated(self) -> None:
        assert ANGLE_TERMINATED_CONFIG.angle_brackets_terminate_unwrapped is True

    @pytest.mark.parametrize(
        ("name", "config"),
        [
            ("default", DEFAULT_CONFIG),
            ("legacy", LEGACY_CONFIG),
            ("doubling", DOUBLING_CONFIG),
            ("angle_terminated", ANGLE_TERMINATED_CONFIG),
            ("Angle-Terminated", ANGLE_TERMINATED_CONFIG),
            (" LEGACY ", LEGACY_CONFIG),
        ],
    )
    def test_get_dialect(self, name: str, config: HashtagConfig) -> None:
        assert get_dialect(name) is config

    def test_get_dialect_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="hashtaglex.syntax.config"):
            get_dialect("doubling")
        assert "doubling" in caplog.text

    def test_unknown_dialect(self) -> None:
        with pytest.raises(HashtagConfigError) as exc_info:
            get_dialect("markdown")
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.CONFIG_DIALECT_UNKNOWN
        assert diagnostic.hint is not None
        assert "legacy" in diagnostic.hint


class TestPunctuationTableValidation:
    """Test custom punctuation tables."""

    def test_custom_table_used_by_scanner(self) -> None:
        config = HashtagConfig(punctuation_table={"~": PunctuationStrategy.NONE})
        match = find_first("#foo~bar", config=config)
        assert match is not None
        assert match.text == "foo"
        default = find_first("#foo~bar")
        assert default is not None
        assert default.text == "foo~bar"

    def test_plain_dict_is_frozen(self) -> None:
        table = {"~": PunctuationStrategy.TRAILING}
        config = HashtagConfig(punctuation_table=table)
        assert isinstance(config.punctuation_table, MappingProxyType)
        table["^"] = PunctuationStrategy.NONE
        assert "^" not in config.punctuation_table

    def test_string_strategies_accepted(self) -> None:
        config = HashtagConfig(punctuation_table={"~": "none"})  # type: ignore[dict-item]
        assert config.punctuation_table["~"] is PunctuationStrategy.NONE

    def test_empty_table(self) -> None:
        config = HashtagConfig(punctuation_table={})
        match = find_first("#foo. bar", config=config)
        assert match is not None
        assert match.text == "foo."

    @pytest.mark.parametrize("key", ["", "ab", 1])
    def test_key_not_single_character(self, key: object) -> None:
        with pytest.raises(HashtagConfigError) as exc_info:
            HashtagConfig(punctuation_table={key: PunctuationStrategy.TRAILING})  # type: ignore[dict-item]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.CONFIG_PUNCTUATION_INVALID

    @pytest.mark.parametrize("key", ["#", "\\", "<", ">", " ", "\n", "\x85", "\ud800"])
    def test_reserved_key(self, key: str) -> None:
        with pytest.raises(HashtagConfigError, match="reserved by the hashtag grammar"):
            HashtagConfig(punctuation_table={key: PunctuationStrategy.TRAILING})

    def test_unknown_strategy(self) -> None:
        with pytest.raises(HashtagConfigError):
            HashtagConfig(punctuation_table={"~": "sometimes"})  # type: ignore[dict-item]

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            HashtagConfig(punctuation_table={"#": PunctuationStrategy.NONE})
