"""Value types produced by the hashtag scanner.

All types are frozen, slotted dataclasses created fresh per scan.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from hashtaglex.enums import HashtagType

__all__ = ["Extraction", "HashtagMatch", "RawMatch"]


@dataclass(frozen=True, slots=True)
class Extraction:
    """Result of one content extractor.

    Attributes:
        end: Index just past the consumed input (exclusive)
        raw_content: Content with escapes retained (never empty)
    """

    end: int
    raw_content: str


@dataclass(frozen=True, slots=True)
class RawMatch:
    """One hashtag located by the scanner, before unescaping.

    Attributes:
        type: Wrapped or unwrapped form
        start: Index of the triggering ``#``
        end: Index just past the hashtag (exclusive)
        raw_content: Content with backslash escapes retained (never empty)
    """

    type: HashtagType
    start: int
    end: int
    raw_content: str


@dataclass(frozen=True, slots=True)
class HashtagMatch:
    """A hashtag with both its source form and its logical text.

    Attributes:
        type: Wrapped or unwrapped form
        start: Index of the triggering ``#``
        end: Index just past the hashtag (exclusive)
        raw: The hashtag as written, ``text[start:end]``
        raw_content: Content with escapes retained
        text: Unescaped content (wrapped line breaks normalized per dialect);
            never empty, never holds a lone surrogate

    Example:
        >>> m = find_first("see #<long name> here")
        >>> m.raw, m.raw_content, m.text, m.start, m.end
        ('#<long name>', 'long name', 'long name', 4, 16)
    """

    type: HashtagType
    start: int
    end: int
    raw: str
    raw_content: str
    text: str

    @property
    def tag(self) -> str:
        """Alias of text."""
        return self.text

    @property
    def span(self) -> tuple[int, int]:
        """(start, end) tuple, as re.Match.span()."""
        return (self.start, self.end)
