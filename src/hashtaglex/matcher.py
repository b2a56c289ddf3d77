"""RegExp-style hashtag matcher with a mutable cursor.

HashtagPattern mirrors the subset of a regular-expression object that
hashtag consumers rely on: ``exec`` with a ``last_index`` cursor in global
and sticky modes, ``test``, ``reset`` and ``match_all``. The hashtag
grammar is not regular (escape parity, surrogate validation, lookahead
punctuation), so matching runs on the scanner rather than ``re``.

Thread Safety:
    A HashtagPattern mutates its cursor in place and is NOT thread-safe.
    Give each consumer its own instance (``hashtag_pattern()`` is cheap).
    The module holds no shared pattern instances. For concurrent, cursor-free
    matching use the functions in hashtaglex.search.

Python 3.13+.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from hashtaglex.constants import FLAG_GLOBAL, FLAG_STICKY, PATTERN_SOURCE
from hashtaglex.diagnostics import ErrorTemplate, HashtagConfigError
from hashtaglex.enums import CaptureMode
from hashtaglex.search import (
    ANY,
    TypeFilter,
    check_index,
    resolve_type_filter,
    to_hashtag_match,
)
from hashtaglex.syntax.config import DEFAULT_CONFIG, HashtagConfig
from hashtaglex.syntax.match import HashtagMatch
from hashtaglex.syntax.scanner import scan_hashtags

__all__ = ["HashtagExecResult", "HashtagPattern", "hashtag_pattern"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HashtagExecResult:
    """Result of HashtagPattern.exec(), shaped like a RegExp exec array.

    Indexing follows the exec array: ``[0]`` is the whole hashtag, ``[1]``
    the captured payload (raw content or text, per the pattern's capture
    mode) and, for patterns matching any type, ``[2]`` the hashtag type.
    ``group()``, ``start()``, ``end()`` and ``span()`` follow re.Match.

    Attributes:
        values: The exec array items
        index: Start index of the hashtag in the input
        match: The underlying structured match
    """

    values: tuple[str, ...]
    index: int
    match: HashtagMatch

    def __getitem__(self, item: int) -> str:
        return self.values[item]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def group(self, n: int = 0) -> str:
        """Return the whole hashtag (0), the payload (1) or the type (2)."""
        return self.values[n]

    def groups(self) -> tuple[str, ...]:
        """Return every item after the whole hashtag."""
        return self.values[1:]

    def start(self) -> int:
        return self.match.start

    def end(self) -> int:
        return self.match.end

    def span(self) -> tuple[int, int]:
        return self.match.span


class HashtagPattern:
    """Hashtag matcher with RegExp ``exec`` semantics.

    Modes:
        - Neither global nor sticky: every exec scans from index 0 and the
          cursor never moves.
        - global: exec scans from ``last_index`` and advances it past each
          match; with a type filter, hashtags of the other type are skipped.
        - sticky: the hashtag must start exactly at ``last_index`` (and have
          the requested type); anything else is a failure.

    In global or sticky mode a failed exec resets ``last_index`` to 0.

    Examples:
        >>> p = HashtagPattern(global_=True)
        >>> [r[1] for r in iter(lambda: p.exec("#a #b"), None)]
        ['a', 'b']
        >>> p.last_index
        0
        >>> HashtagPattern("wrapped", capture="text").exec(r"x #<a\\>b>")[1]
        'a>b'
    """

    __slots__ = (
        "_capture",
        "_config",
        "_global",
        "_last_index",
        "_sticky",
        "_type",
        "_wanted",
    )

    def __init__(
        self,
        type: TypeFilter = ANY,  # noqa: A002
        *,
        global_: bool = False,
        sticky: bool = False,
        capture: CaptureMode | str = CaptureMode.RAW_CONTENT,
        config: HashtagConfig = DEFAULT_CONFIG,
    ) -> None:
        """Initialize pattern.

        Args:
            type: "any", "wrapped" or "unwrapped"
            global_: Advance ``last_index`` across exec calls ("g" flag)
            sticky: Match only at ``last_index`` ("y" flag)
            capture: Payload of group 1, "raw_content" or "text"
            config: Dialect configuration

        Raises:
            HashtagConfigError: If type or capture is not recognised
        """
        self._wanted = resolve_type_filter(type)
        self._type = ANY if self._wanted is None else str(self._wanted)
        try:
            self._capture = CaptureMode(capture)
        except ValueError:
            raise HashtagConfigError(ErrorTemplate.capture_invalid(capture)) from None
        self._global = global_
        self._sticky = sticky
        self._config = config
        self._last_index = 0

    @property
    def source(self) -> str:
        return PATTERN_SOURCE

    @property
    def flags(self) -> str:
        """Flag string as a RegExp reports it: "", "g", "y" or "gy"."""
        return (FLAG_GLOBAL if self._global else "") + (FLAG_STICKY if self._sticky else "")

    @property
    def global_(self) -> bool:
        return self._global

    @property
    def sticky(self) -> bool:
        return self._sticky

    @property
    def type(self) -> str:
        return self._type

    @property
    def capture(self) -> CaptureMode:
        return self._capture

    @property
    def config(self) -> HashtagConfig:
        return self._config

    @property
    def last_index(self) -> int:
        """Cursor used by exec in global and sticky modes."""
        return self._last_index

    @last_index.setter
    def last_index(self, value: int) -> None:
        self._last_index = check_index("last_index", value)

    def _uses_cursor(self) -> bool:
        return self._global or self._sticky

    def _find(self, text: str) -> HashtagMatch | None:
        start = self._last_index if self._uses_cursor() else 0
        wanted = self._wanted
        for item in scan_hashtags(text, start, config=self._config):
            if self._sticky:
                if item.start != start or (wanted is not None and item.type != wanted):
                    break
                return to_hashtag_match(text, item, self._config)
            if wanted is None or item.type == wanted:
                return to_hashtag_match(text, item, self._config)
        if self._uses_cursor():
            if self._last_index:
                logger.debug("No hashtag from index %d; cursor reset", self._last_index)
            self._last_index = 0
        return None

    def exec_match(self, text: str) -> HashtagMatch | None:
        """Find the next hashtag as a structured match.

        Returns:
            HashtagMatch, or None when no (further) hashtag exists
        """
        match = self._find(text)
        if match is not None and self._uses_cursor():
            self._last_index = match.end
        return match

    def exec(self, text: str) -> HashtagExecResult | None:
        """Find the next hashtag as an exec array.

        Returns:
            HashtagExecResult, or None when no (further) hashtag exists
        """
        match = self.exec_match(text)
        if match is None:
            return None
        payload = match.text if self._capture == CaptureMode.TEXT else match.raw_content
        values = (match.raw, payload)
        if self._wanted is None:
            values = (*values, str(match.type))
        return HashtagExecResult(values=values, index=match.start, match=match)

    def test(self, text: str) -> bool:
        """Report whether exec would succeed, leaving ``last_index`` unchanged."""
        saved = self._last_index
        try:
            return self.exec_match(text) is not None
        finally:
            self._last_index = saved

    def reset(self) -> None:
        """Move the cursor back to 0."""
        self._last_index = 0

    def _fresh_global(self) -> "HashtagPattern":
        return HashtagPattern(
            self._type,
            global_=True,
            sticky=self._sticky,
            capture=self._capture,
            config=self._config,
        )

    def match_all(self, text: str) -> Iterator[HashtagExecResult]:
        """Iterate over every exec result, leaving this pattern's cursor alone."""
        pattern = self._fresh_global()
        return iter(lambda: pattern.exec(text), None)

    def match_all_matches(self, text: str) -> Iterator[HashtagMatch]:
        """Iterate over every structured match, leaving this pattern's cursor alone."""
        pattern = self._fresh_global()
        return iter(lambda: pattern.exec_match(text), None)

    def __repr__(self) -> str:
        return (
            f"HashtagPattern(type={self._type!r}, flags={self.flags!r}, "
            f"capture={str(self._capture)!r}, last_index={self._last_index})"
        )


def hashtag_pattern(
    type: TypeFilter = ANY,  # noqa: A002
    *,
    global_: bool = False,
    sticky: bool = False,
    capture: CaptureMode | str = CaptureMode.RAW_CONTENT,
    config: HashtagConfig = DEFAULT_CONFIG,
) -> HashtagPattern:
    """Create a new, independent HashtagPattern.

    Example:
        >>> p = hashtag_pattern("unwrapped", global_=True)
        >>> p.flags
        'g'
    """
    return HashtagPattern(
        type, global_=global_, sticky=sticky, capture=capture, config=config
    )
