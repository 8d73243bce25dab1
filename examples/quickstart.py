"""Quickstart example for currencyfmt.

This example demonstrates formatting currency amounts for several locales,
changing formatter options, and supplying custom locale data.

Requires the CLDR data extra:
    pip install currencyfmt[babel]

Note: Some outputs contain non-breaking spaces (U+00A0) and, for
right-to-left locales, bidi marks. Both come from the locale data.
"""

from currencyfmt import (
    Amount,
    CurrencyDisplay,
    CurrencyFormat,
    Formatter,
    StaticFormatTable,
    get_digits,
    get_symbol,
)

# Example 1: Basic formatting
print("=" * 50)
print("Example 1: Basic Formatting")
print("=" * 50)

formatter = Formatter("en-US")
print(formatter.format(Amount("1234.5", "USD")))
# Output: $1,234.50

print(formatter.format(Amount("-1234.5", "USD")))
# Output: -$1,234.50

# Example 2: Locale conventions
print("\n" + "=" * 50)
print("Example 2: Locale Conventions")
print("=" * 50)

for locale, code in [("de-DE", "EUR"), ("en-IN", "INR"), ("ja", "JPY"), ("bn", "BDT")]:
    result = Formatter(locale).format(Amount("1234567.891", code))
    print(f"{locale:>6}: {result}")
# Output (depends on the installed CLDR version):
#  de-DE: 1.234.567,891 €
#  en-IN: ₹12,34,567.891
#     ja: ￥1,234,567.891
#     bn: ১২,৩৪,৫৬৭.৮৯১৳

# Example 3: Fraction digits
print("\n" + "=" * 50)
print("Example 3: Fraction Digits")
print("=" * 50)

formatter = Formatter("en")
formatter.min_digits = 0
formatter.max_digits = 2
print(formatter.format(Amount("10.00", "USD")))
# Output: $10
print(formatter.format(Amount("10.50", "USD")))
# Output: $10.5

# None means "use the currency's own digits" (2 for USD)
formatter.min_digits = None
formatter.max_digits = None
print(formatter.format(Amount("2.345", "USD")))
# Output: $2.35

# Example 4: Currency display
print("\n" + "=" * 50)
print("Example 4: Currency Display")
print("=" * 50)

formatter = Formatter("de")
formatter.currency_display = CurrencyDisplay.CODE
print(formatter.format(Amount("1234.5", "EUR")))
# Output: 1.234,50 EUR

formatter.currency_display = CurrencyDisplay.NONE
print(formatter.format(Amount("1234.5", "EUR")))
# Output: 1.234,50

formatter.currency_display = CurrencyDisplay.SYMBOL
formatter.symbol_map["USD"] = "$"
print(formatter.format(Amount("1234.5", "USD")))
# Output: 1.234,50 $

# Example 5: Locale fallback
print("\n" + "=" * 50)
print("Example 5: Locale Fallback")
print("=" * 50)

for locale in ["de-XX", "en-US", "es-MX", "xx"]:
    formatter = Formatter(locale)
    print(f"{locale:>6} -> {formatter.resolved_locale}")
# Output:
#  de-XX -> de
#  en-US -> en
#  es-MX -> es-MX
#     xx -> None

# Example 6: Currency metadata
print("\n" + "=" * 50)
print("Example 6: Currency Metadata")
print("=" * 50)

print(get_digits("BHD"))
# Output: (3, True)
print(get_symbol("EUR", "de-AT"))
# Output: ('€', True)

# Example 7: Custom locale data
print("\n" + "=" * 50)
print("Example 7: Custom Locale Data")
print("=" * 50)

accounting = StaticFormatTable({
    "en": CurrencyFormat.from_pattern(
        "¤#,##0.00;(¤#,##0.00)",
        decimal_separator=".",
        grouping_separator=",",
        minus_sign="-",
    ),
})
formatter = Formatter("en-US", table=accounting)
print(formatter.format(Amount("-1234.5", "USD")))
# Output: ($1,234.50)

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
