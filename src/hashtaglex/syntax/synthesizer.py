"""Hashtag synthesis: turn logical text into hashtag source.

create_hashtag() is the inverse of scanning. For every non-empty text
without lone surrogates and every dialect:

    find_first(create_hashtag(text, config=c), config=c).text == text

and the match spans the whole synthesized string. The unwrapped form is
preferred; text that cannot be expressed unwrapped is wrapped.

Python 3.13+. Zero external dependencies.
"""

from hashtaglex.constants import (
    BACKSLASH,
    HASH,
    LINE_BREAKS,
    SYNTHESIS_INVALID,
    WRAP_CLOSE,
    WRAP_OPEN,
)
from hashtaglex.diagnostics import ErrorTemplate, HashtagSynthesisError
from hashtaglex.enums import PunctuationStrategy

from .classifier import find_lone_surrogate, is_angle_bracket, is_strong_terminator
from .config import DEFAULT_CONFIG, HashtagConfig

__all__ = ["create_hashtag"]

_ALWAYS_ESCAPED_UNWRAPPED = frozenset((BACKSLASH, HASH))
_ESCAPED_WRAPPED = frozenset((BACKSLASH, WRAP_OPEN, WRAP_CLOSE))
_ESCAPED_WRAPPED_NORMALIZING = _ESCAPED_WRAPPED | frozenset(LINE_BREAKS)


def _can_be_unwrapped(text: str, config: HashtagConfig) -> bool:
    if config.escaped_angle_opens_wrapped and text.startswith(WRAP_OPEN):
        return False
    for ch in text:
        if is_strong_terminator(ch):
            return False
        if config.angle_brackets_terminate_unwrapped and is_angle_bracket(ch):
            return False
    return True


def _unwrapped_escape_mask(text: str, config: HashtagConfig) -> list[bool]:
    """Decide, right to left, which characters get a backslash.

    Trailing punctuation survives scanning only when something other than
    an unescaped punctuation mark follows it, so each decision depends on
    the one made for the next character.
    """
    table = config.punctuation_table
    n = len(text)
    mask = [False] * n
    for i in range(n - 1, -1, -1):
        ch = text[i]
        if ch in _ALWAYS_ESCAPED_UNWRAPPED or (i == 0 and ch == WRAP_OPEN):
            mask[i] = True
            continue
        strategy = table.get(ch)
        if strategy == PunctuationStrategy.NONE:
            mask[i] = True
        elif strategy == PunctuationStrategy.TRAILING:
            nxt = i + 1
            mask[i] = nxt == n or (text[nxt] in table and not mask[nxt])
    return mask


def _escape_unwrapped(text: str, config: HashtagConfig) -> str:
    mask = _unwrapped_escape_mask(text, config)
    return "".join(
        BACKSLASH + ch if escaped else ch for ch, escaped in zip(text, mask, strict=True)
    )


def _escape_wrapped(text: str, config: HashtagConfig) -> str:
    specials = (
        _ESCAPED_WRAPPED_NORMALIZING
        if config.normalize_wrapped_line_breaks
        else _ESCAPED_WRAPPED
    )
    return "".join(BACKSLASH + ch if ch in specials else ch for ch in text)


def create_hashtag(
    text: str,
    *,
    config: HashtagConfig = DEFAULT_CONFIG,
    strict: bool = False,
) -> str:
    """Create the canonical hashtag for text.

    Args:
        text: Logical hashtag text
        config: Dialect the result must scan back under
        strict: Raise instead of returning the empty-string sentinel

    Returns:
        ``#content`` when the text can be written unwrapped, ``#<content>``
        otherwise, or ``""`` for empty text or text with a lone surrogate

    Raises:
        HashtagSynthesisError: Invalid text and strict=True

    Example:
        >>> create_hashtag("foo#bar")
        '#foo\\\\#bar'
        >>> create_hashtag("a b>c")
        '#<a b\\\\>c>'
        >>> create_hashtag("")
        ''
    """
    if not text:
        if strict:
            raise HashtagSynthesisError(ErrorTemplate.synthesis_empty_text(), text=text)
        return SYNTHESIS_INVALID

    lone = find_lone_surrogate(text)
    if lone != -1:
        if strict:
            raise HashtagSynthesisError(
                ErrorTemplate.synthesis_lone_surrogate(text, lone), text=text
            )
        return SYNTHESIS_INVALID

    if _can_be_unwrapped(text, config):
        return HASH + _escape_unwrapped(text, config)
    return HASH + WRAP_OPEN + _escape_wrapped(text, config) + WRAP_CLOSE
