"""Shared constants for currencyfmt.

This module provides centralized configuration constants used across the
formatter and its data collaborators. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Fraction digits: Formatter defaults for rounding and trimming
- Cache limits: Memory bounds for CLDR lookups
- Currency codes: ISO 4217 shape constraints
- Locale equivalences: Identifiers CLDR treats as identical

Zero external dependencies.
"""

from typing import Final

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Fraction digits
    "DEFAULT_DIGITS",
    "DEFAULT_MAX_DIGITS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Currency codes
    "ISO_CURRENCY_CODE_LENGTH",
    # Locale equivalences
    "LOCALE_ALIASES",
]

# ============================================================================
# FRACTION DIGITS
# ============================================================================

# Placeholder for "use the currency's own number of fraction digits"
# (2 for USD, 0 for JPY, 3 for BHD). Accepted by Formatter.min_digits
# and Formatter.max_digits.
DEFAULT_DIGITS: Final = None

# Default rounding precision. Six digits shows most amounts as-is.
DEFAULT_MAX_DIGITS: Final[int] = 6

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached rule sets / Babel locales / symbol lookups.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: Final[int] = 128

# ============================================================================
# CURRENCY CODES
# ============================================================================

# ISO 4217 currency codes are exactly 3 ASCII letters.
ISO_CURRENCY_CODE_LENGTH: Final[int] = 3

# ============================================================================
# LOCALE EQUIVALENCES
# ============================================================================

# CLDR considers "en" and "en-US" to be equivalent. Resolving the alias
# before the first lookup skips a round trip through the parent chain.
LOCALE_ALIASES: Final[dict[str, str]] = {
    "en-US": "en",
}
