"""Core utilities shared across the syntax layer and the public API.

Isolates the optional Babel dependency so scanner-only installations never
import it.

Exports:
    BabelImportError: Raised when a locale-aware feature runs without Babel
    is_babel_available: Check whether Babel can be imported
    require_babel: Fail fast with an install hint when Babel is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
