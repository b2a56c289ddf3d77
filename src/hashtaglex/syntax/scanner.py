"""Hashtag scanner: locate every hashtag in a text, left to right.

State machine:
    Searching -> TriggerFound -> WrappedExtraction | UnwrappedExtraction
    -> MatchEmitted -> Searching, ending when no live ``#`` remains.

Guarantees:
    - Leftmost: every live ``#`` is examined in order; a successful match
      resumes scanning at its end, so matches never overlap.
    - Wrapped precedence: ``#<`` never falls back to an unwrapped match,
      even when no closing ``>`` exists.
    - Total: malformed input yields fewer matches, never an exception.
    - Linear: the wrapped searches examine each ``>`` and each surrogate at
      most once per scan, however many wrapped triggers fail before them.
      Backward parity walks cover disjoint backslash runs.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator

from hashtaglex.constants import BACKSLASH, HASH, WRAP_OPEN
from hashtaglex.enums import HashtagType

from .classifier import find_lone_surrogate, has_lone_surrogate
from .config import DEFAULT_CONFIG, HashtagConfig
from .escapes import is_unescaped_at, unescape
from .extractors import extract_unwrapped, find_wrapped_close
from .match import Extraction, RawMatch

__all__ = ["scan_hashtags"]


class _WrappedResolver:
    """Wrapped extraction with results shared between triggers of one scan.

    Content always starts right after a ``<``, so neither a backslash run
    nor a surrogate pair crosses a content start. The first live ``>`` and
    the first lone surrogate at or after a position therefore depend only
    on the text, and stay valid for every later start up to themselves.
    Failed triggers between ``#<`` and the same ``>`` reuse them instead of
    searching again.
    """

    __slots__ = ("_close", "_close_from", "_lone", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        self._close_from = -1  # start of the last close search; -1 = none yet
        self._close = -1
        self._lone = -1  # last lone surrogate found inside candidate content

    def _close_at_or_after(self, start: int) -> int:
        if self._close_from != -1 and (self._close == -1 or self._close >= start):
            return self._close
        self._close_from = start
        self._close = find_wrapped_close(self._text, start)
        return self._close

    def extract(self, content_start: int) -> Extraction | None:
        """Same result as extract_wrapped(text, content_start)."""
        close = self._close_at_or_after(content_start)
        if close <= content_start:
            return None
        if content_start <= self._lone < close:
            return None
        lone = find_lone_surrogate(self._text, content_start, close)
        if lone != -1:
            self._lone = lone
            return None
        return Extraction(end=close + 1, raw_content=self._text[content_start:close])


def _wrapped_content_start(text: str, hash_pos: int, config: HashtagConfig) -> int:
    """Return where wrapped content begins after the ``#`` at hash_pos, or -1.

    ``#<`` opens wrapped content. With escaped_angle_opens_wrapped,
    ``#\\<`` does too.
    """
    nxt = hash_pos + 1
    if nxt >= len(text):
        return -1
    if text[nxt] == WRAP_OPEN:
        return nxt + 1
    if (
        config.escaped_angle_opens_wrapped
        and text[nxt] == BACKSLASH
        and text.startswith(WRAP_OPEN, nxt + 1)
    ):
        return nxt + 2
    return -1


def scan_hashtags(
    text: str,
    from_index: int = 0,
    *,
    config: HashtagConfig = DEFAULT_CONFIG,
) -> Iterator[RawMatch]:
    """Lazily yield every hashtag in text starting at or after from_index.

    The generator is finite and holds no state beyond its own position;
    call again to restart. Escape parity of a ``#`` is judged on the full
    text, so a backslash just before from_index still escapes it.

    Args:
        text: Input text
        from_index: Index to start searching at (values past the end
            yield nothing)
        config: Dialect configuration

    Yields:
        RawMatch for each hashtag, in order of start index

    Example:
        >>> [(m.type, m.raw_content) for m in scan_hashtags("#a #<b c>")]
        [(<HashtagType.UNWRAPPED: 'unwrapped'>, 'a'), (<HashtagType.WRAPPED: 'wrapped'>, 'b c')]
    """
    pos = max(from_index, 0)
    wrapped = _WrappedResolver(text)
    while True:
        hash_pos = text.find(HASH, pos)
        if hash_pos == -1:
            return

        if not is_unescaped_at(text, hash_pos):
            pos = hash_pos + 1
            continue

        content_start = _wrapped_content_start(text, hash_pos, config)
        if content_start != -1:
            extraction = wrapped.extract(content_start)
            if extraction is None:
                pos = content_start
                continue
            yield RawMatch(
                type=HashtagType.WRAPPED,
                start=hash_pos,
                end=extraction.end,
                raw_content=extraction.raw_content,
            )
            pos = extraction.end
            continue

        extraction = extract_unwrapped(text, hash_pos + 1, config)
        if extraction is None:
            pos = hash_pos + 1
            continue
        logical = unescape(extraction.raw_content)
        if not logical or has_lone_surrogate(logical):
            pos = hash_pos + 1
            continue
        yield RawMatch(
            type=HashtagType.UNWRAPPED,
            start=hash_pos,
            end=extraction.end,
            raw_content=extraction.raw_content,
        )
        pos = extraction.end
