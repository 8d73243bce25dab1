"""Core utilities shared by the formatter and its CLDR collaborators.

Exports:
    BabelImportError: Raised when a CLDR-backed feature is used without Babel
    is_babel_available: Check for an importable Babel installation
    require_babel: Fail fast with installation guidance when Babel is missing
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
