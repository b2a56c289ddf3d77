"""Hashtag exception hierarchy with structured diagnostics.

Exceptions signal API misuse only (bad configuration, strict synthesis of
invalid text). Scanning untrusted text never raises: a missing or malformed
hashtag is reported as ``None`` or an empty result.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class HashtagError(Exception):
    """Base exception for all hashtag errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize HashtagError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class HashtagConfigError(HashtagError, ValueError):
    """Invalid dialect configuration or pattern option.

    Examples:
    - Punctuation table key that is not a single character
    - Reserved character (``#``, ``\\``, ``<``, ``>``) declared as punctuation
    - Unknown dialect preset name
    - Negative cursor position
    """


class HashtagSynthesisError(HashtagError, ValueError):
    """Text cannot be turned into a hashtag.

    Raised only by ``create_hashtag(..., strict=True)``. The non-strict
    call returns the empty-string sentinel instead.

    Attributes:
        text: The text that was rejected
    """

    def __init__(self, message: str | Diagnostic, *, text: str = "") -> None:
        """Initialize HashtagSynthesisError.

        Args:
            message: Error message string OR Diagnostic object
            text: The rejected text
        """
        super().__init__(message)
        self.text = text
