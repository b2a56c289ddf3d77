"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Synthesis errors (text that cannot become a hashtag)
        2000-2999: Configuration errors (dialect and pattern options)
        3000-3999: Locale errors (punctuation table resolution)

    Scanning never produces a diagnostic: text that holds no valid hashtag
    is a normal outcome, not an error.
    """

    # Synthesis errors (1000-1999)
    SYNTHESIS_EMPTY_TEXT = 1001
    SYNTHESIS_LONE_SURROGATE = 1002

    # Configuration errors (2000-2999)
    CONFIG_PUNCTUATION_INVALID = 2001
    CONFIG_DIALECT_UNKNOWN = 2002
    CONFIG_FILTER_INVALID = 2003
    CONFIG_CAPTURE_INVALID = 2004
    CONFIG_INDEX_INVALID = 2005

    # Locale errors (3000-3999)
    LOCALE_UNKNOWN = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes or UTF-16 code units.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, or line or
                column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)

    @classmethod
    def at(cls, text: str, start: int, end: int | None = None) -> "SourceSpan":
        """Build a span for text[start:end], computing line and column.

        Lines are delimited by LF; CRLF text works because the LF is present.

        Example:
            >>> SourceSpan.at("ab\\ncd", 4)
            SourceSpan(start=4, end=5, line=2, column=2)
        """
        stop = start + 1 if end is None else end
        line = text.count("\n", 0, start) + 1
        last_newline = text.rfind("\n", 0, start)
        column = start - last_newline if last_newline >= 0 else start + 1
        return cls(start=start, end=stop, line=line, column=column)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when the error is not tied to text)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[SYNTHESIS_LONE_SURROGATE]: Text contains a lone surrogate at offset 3
              --> line 1, column 4
              = help: Remove or repair the unpaired UTF-16 surrogate

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
