"""currencyfmt - Locale-aware currency amount formatting.

Renders an amount and a currency code following a locale's conventions:
decimal and grouping separators, grouping sizes (including Indian 3-then-2
grouping), sign glyphs, symbol or code placement, fraction-digit rounding and
trimming, and native digits for non-Latin numbering systems. Locale data comes
from Unicode CLDR via Babel.

Public API:
    Formatter - Formats amounts for one locale, with per-call options
    Amount - Decimal number bound to a currency code
    Locale - Language/script/territory identifier with CLDR parent chain
    CurrencyDisplay - Symbol, code or no currency
    CurrencyFormat - Per-locale formatting rule set
    StaticFormatTable / CLDRFormatTable - Rule set sources

Exceptions:
    CurrencyError - Base exception class
    InvalidNumberError - Amount number is not a finite decimal
    InvalidCurrencyCodeError - Currency code is not three ASCII letters
    BabelImportError - CLDR data requested without Babel installed

Example:
    >>> from currencyfmt import Amount, Formatter
    >>> Formatter("en-US").format(Amount("1234.5", "USD"))
    '$1,234.50'
"""

from .amount import Amount
from .constants import DEFAULT_DIGITS, DEFAULT_MAX_DIGITS
from .core.babel_compat import BabelImportError
from .currency import (
    CLDRCurrencyData,
    CurrencyMetadata,
    get_digits,
    get_symbol,
    is_valid_currency_code,
    list_currency_codes,
)
from .enums import CurrencyDisplay, NumberingSystem
from .errors import CurrencyError, InvalidCurrencyCodeError, InvalidNumberError
from .formats import CLDRFormatTable, CurrencyFormat, FormatTable, StaticFormatTable
from .formatter import Formatter
from .locales import Locale

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("currencyfmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_DIGITS",
    "DEFAULT_MAX_DIGITS",
    "Amount",
    "BabelImportError",
    "CLDRCurrencyData",
    "CLDRFormatTable",
    "CurrencyDisplay",
    "CurrencyError",
    "CurrencyFormat",
    "CurrencyMetadata",
    "FormatTable",
    "Formatter",
    "InvalidCurrencyCodeError",
    "InvalidNumberError",
    "Locale",
    "NumberingSystem",
    "StaticFormatTable",
    "__version__",
    "get_digits",
    "get_symbol",
    "is_valid_currency_code",
    "list_currency_codes",
]
