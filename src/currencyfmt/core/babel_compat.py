"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all CLDR-backed modules.

Design Rationale:
    currencyfmt supports two installation modes:
    - Engine-only: `pip install currencyfmt` (Formatter with caller-supplied
      StaticFormatTable and currency metadata, no external dependencies)
    - CLDR data: `pip install currencyfmt[babel]` (rule sets, symbols and
      fraction digits for every CLDR locale and ISO 4217 currency)

    This module ensures that:
    1. Engine-only installations never trigger Babel imports
    2. CLDR-backed collaborators get consistent, helpful error messages
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from currencyfmt.core.babel_compat import get_babel_numbers

    def my_function(code: str) -> int:
        numbers = get_babel_numbers()  # Raises BabelImportError if missing
        return numbers.get_currency_precision(code)
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from babel import Locale


# pylint: disable=unnecessary-ellipsis
# Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelNumbersProtocol(Protocol):
    """Protocol for Babel numbers module interface.

    Defines the subset of babel.numbers API actually used by currencyfmt.
    Provides type safety without requiring full Babel type stubs.
    """

    def get_currency_precision(self, currency: str) -> int:
        """Return the number of fraction digits used by a currency."""
        ...

    def is_currency(self, currency: str, locale: Locale | str | None = None) -> bool:
        """Check whether a code is a known ISO 4217 currency."""
        ...

    def list_currencies(self, locale: Locale | str | None = None) -> set[str]:
        """Return all known currency codes."""
        ...

    def get_decimal_symbol(
        self, locale: Locale | str | None = None, numbering_system: str = "latn"
    ) -> str:
        """Return the decimal separator of a locale."""
        ...

    def get_group_symbol(
        self, locale: Locale | str | None = None, numbering_system: str = "latn"
    ) -> str:
        """Return the grouping separator of a locale."""
        ...

    def get_plus_sign_symbol(
        self, locale: Locale | str | None = None, numbering_system: str = "latn"
    ) -> str:
        """Return the plus sign of a locale."""
        ...

    def get_minus_sign_symbol(
        self, locale: Locale | str | None = None, numbering_system: str = "latn"
    ) -> str:
        """Return the minus sign of a locale."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_global",
    "get_babel_numbers",
    "get_locale_class",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install currencyfmt[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions/methods that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the Babel numbers module.

    Returns:
        The babel.numbers module (typed via BabelNumbersProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers  # type: ignore[return-value]


def get_babel_global(key: str) -> Any:
    """Get a process-wide CLDR table from Babel's global data.

    Used for tables that are not tied to a single locale, such as
    ``parent_exceptions`` (CLDR parentLocales).

    Args:
        key: Babel global data key

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_global")
    from babel.core import get_global  # noqa: PLC0415

    return get_global(key)
