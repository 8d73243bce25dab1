"""Locale-aware currency amount formatting.

The Formatter binds a locale to its currency rule set once, at construction,
by walking the locale's parent chain. Each call to format() is then a pure
function of the amount and the formatter's current options.

Architecture:
    - Locale resolution: en-US is treated as en, then parent chain walk
      against a FormatTable (CLDR by default)
    - Pattern application: parsed pattern segments, positive or negative
      sub-pattern chosen by the amount's sign
    - Number formatting: round, split, group, trim/pad, localize digits
    - Currency display: symbol (with per-code overrides), code, or nothing

Formatting never raises for unknown locales or currencies. A locale with no
rule set anywhere in its chain formats with the zero-value rule set, which
yields empty output; ``resolved_locale`` is None in that case.

Thread Safety:
    Rule sets and lookup caches are read-only once populated and may be
    shared freely. Formatter options are plain attributes: configure a shared
    Formatter before handing it to other threads, or serialize changes.
"""

from __future__ import annotations

import logging

from currencyfmt.amount import Amount
from currencyfmt.constants import DEFAULT_DIGITS, DEFAULT_MAX_DIGITS, LOCALE_ALIASES
from currencyfmt.currency import CLDRCurrencyData, CurrencyMetadata
from currencyfmt.enums import CurrencyDisplay
from currencyfmt.formats import CLDR_FORMATS, CurrencyFormat, FormatTable
from currencyfmt.locales import Locale
from currencyfmt.numbers import group_digits, localize_digits
from currencyfmt.pattern import SegmentKind, SubPattern

__all__ = ["Formatter"]

# LRM, RLM and ALM. Not whitespace, but they may sit between the number and
# a hidden currency.
_BIDI_MARKS = frozenset("\u200e\u200f\u061c")

logger = logging.getLogger(__name__)


def _resolve_format(
    locale: Locale, table: FormatTable
) -> tuple[Locale | None, CurrencyFormat]:
    """Find the nearest locale in the parent chain that has a rule set."""
    current = locale
    while not current.is_empty():
        # CLDR considers "en" and "en-US" to be equivalent.
        # Fall back immediately for better performance.
        alias = LOCALE_ALIASES.get(current.identifier())
        if alias is not None:
            current = Locale.parse(alias)
        currency_format = table.lookup(current.identifier())
        if currency_format is not None:
            return current, currency_format
        logger.debug("No currency format for '%s', trying parent locale", current)
        current = current.parent()

    logger.warning(
        "No currency format found for locale '%s' or its parents; output will be empty",
        locale,
    )
    return None, CurrencyFormat()


def _check_digits(name: str, value: int | None) -> int | None:
    if value is None:
        return value
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{name} must be None or a non-negative int, got {value!r}"
        raise ValueError(msg)
    return value


def _is_currency_slot(segments: SubPattern, index: int) -> bool:
    return 0 <= index < len(segments) and segments[index].kind is SegmentKind.CURRENCY


def _lstrip_keep_marks(text: str) -> str:
    """Remove leading whitespace, looking past bidi marks and keeping them."""
    marks: list[str] = []
    index = 0
    while index < len(text) and (text[index].isspace() or text[index] in _BIDI_MARKS):
        if text[index] in _BIDI_MARKS:
            marks.append(text[index])
        index += 1
    return "".join(marks) + text[index:]


def _rstrip_keep_marks(text: str) -> str:
    return _lstrip_keep_marks(text[::-1])[::-1]


class Formatter:
    """Formats currency amounts for a locale.

    Options are mutable attributes that may be changed between calls:

    Attributes:
        no_grouping: Turn off grouping of integer digits (default: False)
        min_digits: Minimum number of fraction digits. Trailing zeros past
            the minimum are removed (0 = no trailing zeros). None uses the
            currency's default (2 for USD, 0 for JPY).
        max_digits: Maximum number of fraction digits; amounts are rounded
            to this many digits. Defaults to 6 so most amounts show as-is.
            None uses the currency's default.
        currency_display: CurrencyDisplay.SYMBOL (default), CODE or NONE.
            Any other value hides the currency.
        symbol_map: Per-code symbol overrides, e.g. {"USD": "$"} shows "$"
            even where the locale's own symbol is "US$".

    Examples:
        >>> formatter = Formatter("en-US")
        >>> formatter.format(Amount("1234.5", "USD"))
        '$1,234.50'
        >>> formatter.format(Amount("-1234.5", "USD"))
        '-$1,234.50'
        >>> formatter.currency_display = CurrencyDisplay.CODE
        >>> formatter.format(Amount("1234.5", "USD"))
        'USD1,234.50'

        >>> formatter = Formatter("de-DE")
        >>> formatter.format(Amount("1234.5", "EUR"))
        '1.234,50\\xa0€'
    """

    __slots__ = (
        "_currencies",
        "_format",
        "_locale",
        "_max_digits",
        "_min_digits",
        "_resolved_locale",
        "currency_display",
        "no_grouping",
        "symbol_map",
    )

    def __init__(
        self,
        locale: Locale | str,
        *,
        table: FormatTable | None = None,
        currencies: CurrencyMetadata | None = None,
    ) -> None:
        """Create a formatter for a locale.

        Args:
            locale: Locale or identifier ('en-US', 'sr_Latn_RS')
            table: Rule set source (default: CLDR via Babel)
            currencies: Currency digits/symbol source (default: CLDR via Babel)
        """
        if isinstance(locale, str):
            locale = Locale.parse(locale)
        self._locale = locale
        self._resolved_locale, self._format = _resolve_format(
            locale, table if table is not None else CLDR_FORMATS
        )
        self._currencies: CurrencyMetadata = (
            currencies if currencies is not None else CLDRCurrencyData()
        )
        self.no_grouping = False
        self._min_digits: int | None = DEFAULT_DIGITS
        self._max_digits: int | None = DEFAULT_MAX_DIGITS
        self.currency_display: CurrencyDisplay | str = CurrencyDisplay.SYMBOL
        self.symbol_map: dict[str, str] = {}

    @property
    def locale(self) -> Locale:
        """The requested locale (used for symbol lookups)."""
        return self._locale

    @property
    def resolved_locale(self) -> Locale | None:
        """Locale whose rule set was bound, or None if none was found."""
        return self._resolved_locale

    @property
    def currency_format(self) -> CurrencyFormat:
        """The bound rule set."""
        return self._format

    @property
    def min_digits(self) -> int | None:
        """Minimum fraction digits (None = currency default)."""
        return self._min_digits

    @min_digits.setter
    def min_digits(self, value: int | None) -> None:
        self._min_digits = _check_digits("min_digits", value)

    @property
    def max_digits(self) -> int | None:
        """Maximum fraction digits (None = currency default)."""
        return self._max_digits

    @max_digits.setter
    def max_digits(self, value: int | None) -> None:
        self._max_digits = _check_digits("max_digits", value)

    def format(self, amount: Amount) -> str:
        """Format a currency amount.

        Args:
            amount: Amount to format

        Returns:
            Locale-formatted amount, e.g. '$1,234.50' or '1.234,50 €'
        """
        negative = amount.is_negative()
        segments = self._format.parsed_pattern.select(negative=negative)
        if negative:
            # The minus sign will be provided by the pattern.
            amount = amount.mul(-1)
        formatted_number = self._format_number(amount)
        formatted_currency = self._format_currency(amount.currency_code)
        return self._apply_pattern(segments, formatted_number, formatted_currency)

    def _apply_pattern(
        self, segments: SubPattern, formatted_number: str, formatted_currency: str
    ) -> str:
        hide_currency = not formatted_currency
        parts: list[str] = []
        for index, segment in enumerate(segments):
            match segment.kind:
                case SegmentKind.NUMBER:
                    parts.append(formatted_number)
                case SegmentKind.CURRENCY:
                    parts.append(formatted_currency)
                case SegmentKind.PLUS:
                    parts.append(self._format.plus_sign)
                case SegmentKind.MINUS:
                    parts.append(self._format.minus_sign)
                case _:
                    text = segment.text
                    if hide_currency:
                        # Many patterns have a non-breaking space between
                        # the number and currency, not needed in this case.
                        if _is_currency_slot(segments, index - 1):
                            text = _lstrip_keep_marks(text)
                        if _is_currency_slot(segments, index + 1):
                            text = _rstrip_keep_marks(text)
                    parts.append(text)
        formatted = "".join(parts)
        if hide_currency:
            return _rstrip_keep_marks(_lstrip_keep_marks(formatted))
        return formatted

    def _format_number(self, amount: Amount) -> str:
        """Round, group, trim and localize a non-negative amount."""
        min_digits = self._min_digits
        if min_digits is None:
            min_digits, _ = self._currencies.get_digits(amount.currency_code)
        max_digits = self._max_digits
        if max_digits is None:
            max_digits, _ = self._currencies.get_digits(amount.currency_code)

        amount = amount.round_to(max_digits)
        integer_digits, _, fraction_digits = amount.number.partition(".")
        integer_digits = self._group_integer_digits(integer_digits)
        if min_digits < max_digits:
            # Strip trailing zeros, then re-add them up to min_digits.
            fraction_digits = fraction_digits.rstrip("0").ljust(min_digits, "0")

        formatted = integer_digits
        if fraction_digits:
            formatted += self._format.decimal_separator + fraction_digits
        return localize_digits(formatted, self._format.numbering_system)

    def _group_integer_digits(self, integer_digits: str) -> str:
        if self.no_grouping:
            return integer_digits
        return group_digits(
            integer_digits,
            self._format.grouping_separator,
            primary_size=self._format.primary_grouping_size,
            secondary_size=self._format.secondary_grouping_size,
            min_grouping_digits=self._format.min_grouping_digits,
        )

    def _format_currency(self, currency_code: str) -> str:
        match self.currency_display:
            case CurrencyDisplay.SYMBOL:
                symbol = self.symbol_map.get(currency_code)
                if symbol is None:
                    symbol, _ = self._currencies.get_symbol(currency_code, self._locale)
                return symbol
            case CurrencyDisplay.CODE:
                return currency_code
            case _:
                return ""

    def __repr__(self) -> str:
        return f"Formatter(locale={self._locale.identifier()!r})"
