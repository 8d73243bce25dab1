"""ISO 4217 currency metadata via Babel CLDR data.

Provides the two lookups the formatter needs (default fraction digits and
locale-specific symbols) plus code validation and listing. Lookups never
raise for unknown codes or locales: they return a default together with a
``found`` flag. Results are cached for performance.

Requires Babel installation:
    pip install currencyfmt[babel]
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from currencyfmt.constants import (
    ISO_CURRENCY_CODE_LENGTH,
    LOCALE_ALIASES,
    MAX_LOCALE_CACHE_SIZE,
)
from currencyfmt.core.babel_compat import get_babel_numbers
from currencyfmt.locale_utils import cldr_locale_exists, get_babel_locale
from currencyfmt.locales import Locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol and default implementation
    "CurrencyMetadata",
    "CLDRCurrencyData",
    # Lookup functions
    "get_digits",
    "get_symbol",
    "list_currency_codes",
    # Type guards
    "is_valid_currency_code",
    # Cache management
    "clear_currency_cache",
]


class CurrencyMetadata(Protocol):
    """Currency metadata consumed by the Formatter."""

    def get_digits(self, currency_code: str) -> tuple[int, bool]:
        """Return (default fraction digits, found); unknown codes give (0, False)."""
        ...

    def get_symbol(self, currency_code: str, locale: Locale) -> tuple[str, bool]:
        """Return (symbol, found); unknown symbols give (currency_code, False)."""
        ...


# ============================================================================
# CACHED LOOKUP FUNCTIONS
# ============================================================================


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_digits_impl(code_upper: str) -> tuple[int, bool]:
    numbers = get_babel_numbers()
    if not numbers.is_currency(code_upper):
        return 0, False
    return numbers.get_currency_precision(code_upper), True


def get_digits(currency_code: str) -> tuple[int, bool]:
    """Get the number of fraction digits a currency uses.

    Args:
        currency_code: ISO 4217 code (e.g., 'USD', 'JPY'). Case-insensitive.

    Returns:
        Tuple of (digits, found). Unknown codes return (0, False).

    Raises:
        BabelImportError: If Babel not installed.

    Example:
        >>> get_digits("USD")
        (2, True)
        >>> get_digits("JPY")
        (0, True)
        >>> get_digits("XXQ")
        (0, False)
    """
    return _get_digits_impl(currency_code.upper())


def _nearest_cldr_locale(locale: Locale) -> str | None:
    """Identifier of the first locale in the parent chain with CLDR data."""
    current = locale
    while not current.is_empty():
        identifier = LOCALE_ALIASES.get(current.identifier(), current.identifier())
        if cldr_locale_exists(identifier):
            return identifier
        current = current.parent()
    return None


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_symbol_impl(code_upper: str, locale: Locale) -> tuple[str, bool]:
    identifier = _nearest_cldr_locale(locale)
    if identifier is None:
        return code_upper, False
    # Babel merges inherited data, so the nearest locale already
    # carries every symbol defined further up the chain.
    symbol = get_babel_locale(identifier).currency_symbols.get(code_upper)
    if not symbol:
        return code_upper, False
    return symbol, True


def get_symbol(currency_code: str, locale: Locale | str) -> tuple[str, bool]:
    """Get the symbol a locale uses for a currency.

    Args:
        currency_code: ISO 4217 code. Case-insensitive.
        locale: Locale or locale identifier (BCP-47 or POSIX)

    Returns:
        Tuple of (symbol, found). When no locale in the parent chain defines
        a symbol, returns (currency_code, False).

    Raises:
        BabelImportError: If Babel not installed.

    Example:
        >>> get_symbol("USD", "en")
        ('$', True)
        >>> get_symbol("EUR", "de-AT")
        ('€', True)
    """
    if isinstance(locale, str):
        locale = Locale.parse(locale)
    return _get_symbol_impl(currency_code.upper(), locale)


@lru_cache(maxsize=1)
def list_currency_codes() -> tuple[str, ...]:
    """List all known ISO 4217 codes (current and historical), sorted.

    Raises:
        BabelImportError: If Babel not installed.
    """
    codes = get_babel_numbers().list_currencies()
    return tuple(sorted(code for code in codes if len(code) == ISO_CURRENCY_CODE_LENGTH))


# ============================================================================
# TYPE GUARDS
# ============================================================================


def is_valid_currency_code(value: object) -> bool:
    """Check if a value is a known ISO 4217 currency code.

    Validates against Babel's CLDR currency database.

    Raises:
        BabelImportError: If Babel not installed.
    """
    if not isinstance(value, str) or len(value) != ISO_CURRENCY_CODE_LENGTH:
        return False
    _, found = get_digits(value)
    return found


# ============================================================================
# DEFAULT IMPLEMENTATION
# ============================================================================


@dataclass(frozen=True, slots=True)
class CLDRCurrencyData:
    """CurrencyMetadata backed by the module-level CLDR lookups."""

    def get_digits(self, currency_code: str) -> tuple[int, bool]:
        """Return (default fraction digits, found)."""
        return get_digits(currency_code)

    def get_symbol(self, currency_code: str, locale: Locale) -> tuple[str, bool]:
        """Return (symbol, found)."""
        return get_symbol(currency_code, locale)


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_currency_cache() -> None:
    """Clear all currency metadata caches. Thread-safe."""
    _get_digits_impl.cache_clear()
    _get_symbol_impl.cache_clear()
    list_currency_codes.cache_clear()
