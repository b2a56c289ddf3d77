"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def synthesis_empty_text() -> Diagnostic:
        """Hashtag synthesis was given empty text.

        Returns:
            Diagnostic for SYNTHESIS_EMPTY_TEXT
        """
        return Diagnostic(
            code=DiagnosticCode.SYNTHESIS_EMPTY_TEXT,
            message="Cannot create a hashtag from empty text",
            hint="Hashtag text must contain at least one character",
        )

    @staticmethod
    def synthesis_lone_surrogate(text: str, offset: int) -> Diagnostic:
        """Hashtag synthesis was given text holding an unpaired surrogate.

        Args:
            text: The rejected text
            offset: Index of the lone surrogate in text

        Returns:
            Diagnostic for SYNTHESIS_LONE_SURROGATE
        """
        msg = f"Text contains a lone surrogate U+{ord(text[offset]):04X} at offset {offset}"
        return Diagnostic(
            code=DiagnosticCode.SYNTHESIS_LONE_SURROGATE,
            message=msg,
            span=SourceSpan.at(text, offset),
            hint="Remove or repair the unpaired UTF-16 surrogate",
        )

    @staticmethod
    def punctuation_key_invalid(key: object) -> Diagnostic:
        """Punctuation table key is not a single character.

        Args:
            key: The offending key

        Returns:
            Diagnostic for CONFIG_PUNCTUATION_INVALID
        """
        msg = f"Punctuation table key {key!r} must be a single character"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_PUNCTUATION_INVALID,
            message=msg,
            hint="Use one str of length 1 per punctuation mark",
        )

    @staticmethod
    def punctuation_key_reserved(key: str) -> Diagnostic:
        """Punctuation table declares a character with fixed grammar meaning.

        Args:
            key: The reserved character

        Returns:
            Diagnostic for CONFIG_PUNCTUATION_INVALID
        """
        msg = f"Character U+{ord(key):04X} is reserved by the hashtag grammar"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_PUNCTUATION_INVALID,
            message=msg,
            hint="Whitespace, control characters, '#', '\\', '<' and '>' cannot be punctuation",
        )

    @staticmethod
    def punctuation_strategy_invalid(key: str, strategy: object) -> Diagnostic:
        """Punctuation table maps a character to an unknown strategy.

        Args:
            key: The punctuation character
            strategy: The offending value

        Returns:
            Diagnostic for CONFIG_PUNCTUATION_INVALID
        """
        msg = f"Unknown punctuation strategy {strategy!r} for U+{ord(key):04X}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_PUNCTUATION_INVALID,
            message=msg,
            hint="Use PunctuationStrategy.TRAILING or PunctuationStrategy.NONE",
        )

    @staticmethod
    def dialect_unknown(name: str, known: tuple[str, ...]) -> Diagnostic:
        """Dialect preset name not recognised.

        Args:
            name: Requested preset name
            known: Available preset names

        Returns:
            Diagnostic for CONFIG_DIALECT_UNKNOWN
        """
        msg = f"Unknown hashtag dialect '{name}'"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_DIALECT_UNKNOWN,
            message=msg,
            hint=f"Available dialects: {', '.join(known)}",
        )

    @staticmethod
    def filter_invalid(value: object) -> Diagnostic:
        """Hashtag type filter not recognised.

        Args:
            value: The offending filter

        Returns:
            Diagnostic for CONFIG_FILTER_INVALID
        """
        msg = f"Unknown hashtag type filter {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_FILTER_INVALID,
            message=msg,
            hint="Use 'any', 'wrapped' or 'unwrapped'",
        )

    @staticmethod
    def capture_invalid(value: object) -> Diagnostic:
        """Capture mode not recognised.

        Args:
            value: The offending capture mode

        Returns:
            Diagnostic for CONFIG_CAPTURE_INVALID
        """
        msg = f"Unknown capture mode {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_CAPTURE_INVALID,
            message=msg,
            hint="Use 'raw_content' or 'text'",
        )

    @staticmethod
    def index_invalid(name: str, value: int) -> Diagnostic:
        """Cursor or start index is negative.

        Args:
            name: Parameter name
            value: The offending index

        Returns:
            Diagnostic for CONFIG_INDEX_INVALID
        """
        msg = f"{name} must be >= 0, got {value}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_INDEX_INVALID,
            message=msg,
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale could not be resolved to a punctuation table.

        Args:
            locale_code: Requested locale
            reason: Underlying error text

        Returns:
            Diagnostic for LOCALE_UNKNOWN (warning severity)
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Falling back to the default punctuation table",
            severity="warning",
        )
