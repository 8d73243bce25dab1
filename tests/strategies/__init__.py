"""Hypothesis strategies for currencyfmt property-based testing.

Usage:
    from tests.strategies.currency import currency_amounts, static_locales

Event-Emitting Strategies (HypoFuzz-Optimized):
    - currency_amounts: emits currency_amount_magnitude={micro|...|huge}
    - digit_strings: emits digit_string_length={short|medium|long}
"""

from .currency import (
    STATIC_FORMATS,
    StubCurrencies,
    currency_amounts,
    digit_strings,
    static_locales,
)

__all__ = [
    "STATIC_FORMATS",
    "StubCurrencies",
    "currency_amounts",
    "digit_strings",
    "static_locales",
]
