"""Tests for the cursor-free search API."""

from __future__ import annotations

import pytest
from hypothesis import given

from hashtaglex import (
    DOUBLING_CONFIG,
    LEGACY_CONFIG,
    HashtagConfigError,
    HashtagMatch,
    HashtagType,
    find_all,
    find_all_wrapped,
    find_first,
    find_hashtag,
    iterate_hashtags,
)
from hashtaglex.diagnostics import DiagnosticCode
from tests.strategies import scan_inputs


class TestFindFirst:
    """Test find_first / find_hashtag."""

    def test_none_when_absent(self) -> None:
        assert find_first("nothing to see") is None
        assert find_first("") is None

    def test_structured_match(self) -> None:
        assert find_first("see #<long name> here") == HashtagMatch(
            type=HashtagType.WRAPPED,
            start=4,
            end=16,
            raw="#<long name>",
            raw_content="long name",
            text="long name",
        )

    def test_unescaped_text(self) -> None:
        match = find_first("Try #test\\#ing now")
        assert match is not None
        assert match.raw == "#test\\#ing"
        assert match.raw_content == "test\\#ing"
        assert match.text == "test#ing"
        assert match.tag == "test#ing"

    def test_alias(self) -> None:
        assert find_hashtag is find_first

    def test_type_filter(self) -> None:
        text = "#plain and #<wrapped one>"
        wrapped = find_first(text, type="wrapped")
        assert wrapped is not None
        assert wrapped.text == "wrapped one"
        unwrapped = find_first(text, type=HashtagType.UNWRAPPED)
        assert unwrapped is not None
        assert unwrapped.text == "plain"

    def test_from_index(self) -> None:
        match = find_first("#a #b", from_index=1)
        assert match is not None
        assert match.text == "b"
        assert match.start == 3

    def test_doubling_dialect(self) -> None:
        text = "This is #awesome!! Right?"
        default = find_first(text)
        doubling = find_first(text, config=DOUBLING_CONFIG)
        assert default is not None
        assert doubling is not None
        assert default.text == "awesome"
        assert doubling.text == "awesome!"


class TestWrappedLineBreaks:
    """Test line-break normalization in wrapped text."""

    def test_normalized_by_default(self) -> None:
        match = find_first("#<multi\n   line\r\ntag>")
        assert match is not None
        assert match.raw_content == "multi\n   line\r\ntag"
        assert match.text == "multi line tag"

    def test_kept_in_legacy(self) -> None:
        match = find_first("#<multi\nline>", config=LEGACY_CONFIG)
        assert match is not None
        assert match.text == "multi\nline"

    def test_unwrapped_unaffected(self) -> None:
        match = find_first("#a\\\\")
        assert match is not None
        assert match.text == "a\\"


class TestFindAll:
    """Test find_all, find_all_wrapped and iterate_hashtags."""

    def test_complex_input(self, complex_input: str) -> None:
        assert [m.text for m in find_all(complex_input)] == [
            "long name",
            "test#ing",
            "<magic>",
            "\U0001f680.launch",
            "skip",
            "the end",
        ]

    def test_wrapped_only(self, complex_input: str) -> None:
        assert [m.text for m in find_all_wrapped(complex_input)] == ["long name", "skip"]
        assert [m.start for m in find_all(complex_input, type="wrapped")] == [3, 55]

    def test_unwrapped_only(self, complex_input: str) -> None:
        starts = [m.start for m in find_all(complex_input, type="unwrapped")]
        assert starts == [16, 29, 42, 67]

    def test_filter_does_not_split_wrapped(self) -> None:
        """Filtering for unwrapped never re-reads wrapped content."""
        assert find_all("#<a #b>", type="unwrapped") == []

    def test_from_index(self, complex_input: str) -> None:
        assert [m.start for m in find_all(complex_input, from_index=30)] == [42, 55, 67]

    def test_iterate_is_lazy_and_restartable(self) -> None:
        iterator = iterate_hashtags("#a #b #c")
        assert next(iterator).text == "a"
        assert [m.text for m in iterator] == ["b", "c"]
        assert [m.text for m in iterate_hashtags("#a #b #c")] == ["a", "b", "c"]

    @given(text=scan_inputs())
    def test_find_all_agrees_with_find_first(self, text: str) -> None:
        """PROPERTY: find_first is the head of find_all."""
        matches = find_all(text)
        first = find_first(text)
        assert first == (matches[0] if matches else None)

    @given(text=scan_inputs())
    def test_raw_slices_text(self, text: str) -> None:
        """PROPERTY: raw is exactly the matched slice; text is never empty."""
        for m in iterate_hashtags(text):
            assert m.raw == text[m.start : m.end]
            assert m.text


class TestSearchValidation:
    """Test argument validation."""

    def test_unknown_type_filter(self) -> None:
        with pytest.raises(HashtagConfigError) as exc_info:
            find_all("#a", type="bold")  # type: ignore[arg-type]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.CONFIG_FILTER_INVALID

    def test_from_index_keeps_escape_before_offset(self) -> None:
        """A backslash before from_index still escapes the ``#`` at it."""
        assert find_first("\\#a", from_index=1) is None
        assert find_first("\\\\#a", from_index=2) is not None

    def test_negative_from_index(self) -> None:
        with pytest.raises(HashtagConfigError, match="from_index must be >= 0"):
            find_first("#a", from_index=-1)

    def test_validation_is_eager(self) -> None:
        """Invalid arguments raise at call time, not on first iteration."""
        with pytest.raises(HashtagConfigError):
            iterate_hashtags("#a", type="nope")  # type: ignore[arg-type]
