"""Per-locale currency formatting rule sets and the tables that hold them.

A CurrencyFormat is the immutable set of formatting parameters for one
locale: pattern, separators, grouping sizes, sign glyphs and numbering
system. Tables map locale identifiers to rule sets:

    - CLDRFormatTable: built on demand from Babel's CLDR data and cached
    - StaticFormatTable: a read-only mapping supplied by the caller

Tables answer for exact identifiers only; walking the parent chain is the
Formatter's job.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol

from currencyfmt.constants import MAX_LOCALE_CACHE_SIZE
from currencyfmt.core.babel_compat import get_babel_numbers
from currencyfmt.enums import NumberingSystem
from currencyfmt.locale_utils import cldr_locale_exists, get_babel_locale
from currencyfmt.locales import Locale
from currencyfmt.pattern import CURRENCY_SIGN, CurrencyPattern, grouping_sizes, parse_pattern

if TYPE_CHECKING:
    from babel import Locale as BabelLocale

__all__ = [
    "CLDR_FORMATS",
    "CLDRFormatTable",
    "CurrencyFormat",
    "FormatTable",
    "StaticFormatTable",
    "clear_format_cache",
]

logger = logging.getLogger(__name__)

# CLDR minimumGroupingDigits, which Babel does not expose. Values are the
# <numbers><minimumGroupingDigits> elements of common/main/<locale>.xml in
# CLDR 44, the release bundled with Babel 2.14. Only these entries are
# carried; extend from the same files when the Babel floor moves. Looked up
# along the locale's parent chain; locales not covered group from four digits.
_MIN_GROUPING_DIGITS: dict[str, int] = {
    "es": 2,
    "es-419": 1,
    "pl": 2,
    "pt-PT": 2,
}
_DEFAULT_MIN_GROUPING_DIGITS = 1


@dataclass(frozen=True, slots=True)
class CurrencyFormat:
    """Immutable currency formatting rules for one locale.

    ``CurrencyFormat()`` is the zero-value rule set: empty pattern, no
    separators, no grouping. Formatters fall back to it when no locale in
    the parent chain has data.

    Attributes:
        pattern: CLDR currency pattern, optional negative sub-pattern after ';'
        decimal_separator: Glyph(s) between integer and fraction digits
        grouping_separator: Glyph(s) between integer digit groups
        primary_grouping_size: Size of the rightmost group (0 = no grouping)
        secondary_grouping_size: Size of every group left of the primary one
        min_grouping_digits: Digits required left of the primary group
            before grouping applies (2 keeps '1234' ungrouped)
        numbering_system: Digit glyph set
        plus_sign: Glyph(s) substituted for '+' in the pattern
        minus_sign: Glyph(s) substituted for '-' in the pattern

    Example:
        >>> fmt = CurrencyFormat.from_pattern("¤#,##,##0.00", decimal_separator=".",
        ...                                   grouping_separator=",", minus_sign="-")
        >>> fmt.primary_grouping_size, fmt.secondary_grouping_size
        (3, 2)
    """

    pattern: str = ""
    decimal_separator: str = ""
    grouping_separator: str = ""
    primary_grouping_size: int = 0
    secondary_grouping_size: int = 0
    min_grouping_digits: int = 0
    numbering_system: NumberingSystem = NumberingSystem.LATN
    plus_sign: str = ""
    minus_sign: str = ""

    @classmethod
    def from_pattern(cls, pattern: str, **fields: Any) -> CurrencyFormat:
        """Build a rule set whose grouping sizes come from the pattern.

        ``min_grouping_digits`` defaults to 1; other fields default to their
        zero values and may be given as keyword arguments.
        """
        primary, secondary = grouping_sizes(pattern)
        fields.setdefault("min_grouping_digits", _DEFAULT_MIN_GROUPING_DIGITS)
        return cls(
            pattern=pattern,
            primary_grouping_size=primary,
            secondary_grouping_size=secondary,
            **fields,
        )

    @property
    def parsed_pattern(self) -> CurrencyPattern:
        """Pattern parsed into segments (cached per pattern string)."""
        return parse_pattern(self.pattern)


class FormatTable(Protocol):
    """Lookup of rule sets by exact locale identifier."""

    def lookup(self, identifier: str) -> CurrencyFormat | None:
        """Return the rule set for a BCP-47 identifier, or None."""
        ...


class StaticFormatTable:
    """FormatTable over a fixed mapping of identifiers to rule sets.

    Keys may use BCP-47 ('pt-PT') or POSIX ('pt_PT') separators. The
    mapping is copied on construction and exposed read-only.

    Example:
        >>> table = StaticFormatTable({"en": CurrencyFormat.from_pattern("¤#,##0.00")})
        >>> table.lookup("en") is not None
        True
        >>> table.lookup("fr") is None
        True
    """

    __slots__ = ("_formats",)

    def __init__(self, formats: Mapping[str, CurrencyFormat]) -> None:
        self._formats: Mapping[str, CurrencyFormat] = MappingProxyType(
            {Locale.parse(key).identifier(): value for key, value in formats.items()}
        )

    def lookup(self, identifier: str) -> CurrencyFormat | None:
        """Return the rule set for an identifier, or None."""
        return self._formats.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._formats

    def __iter__(self) -> Iterator[str]:
        return iter(self._formats)

    def __len__(self) -> int:
        return len(self._formats)

    def __repr__(self) -> str:
        return f"StaticFormatTable({sorted(self._formats)!r})"


def _min_grouping_digits(identifier: str) -> int:
    current = Locale.parse(identifier)
    while not current.is_empty():
        digits = _MIN_GROUPING_DIGITS.get(current.identifier())
        if digits is not None:
            return digits
        current = current.parent()
    return _DEFAULT_MIN_GROUPING_DIGITS


def _numbering_system(babel_locale: BabelLocale, identifier: str) -> NumberingSystem:
    name = babel_locale.default_numbering_system
    try:
        return NumberingSystem(name)
    except ValueError:
        logger.debug(
            "Numbering system '%s' of locale %s is not supported; using latn",
            name,
            identifier,
        )
        return NumberingSystem.LATN


def _standard_currency_pattern(babel_locale: BabelLocale, identifier: str) -> str:
    standard = babel_locale.currency_formats.get("standard")
    pattern = str(getattr(standard, "pattern", standard or ""))
    if CURRENCY_SIGN not in pattern:
        logger.debug("Currency pattern for locale %s lacks placeholder", identifier)
    return pattern


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _load_cldr_format(identifier: str) -> CurrencyFormat | None:
    if not cldr_locale_exists(identifier):
        return None
    babel_locale = get_babel_locale(identifier)
    numbers = get_babel_numbers()
    system = _numbering_system(babel_locale, identifier)
    pattern = _standard_currency_pattern(babel_locale, identifier)
    primary, secondary = grouping_sizes(pattern)
    return CurrencyFormat(
        pattern=pattern,
        decimal_separator=numbers.get_decimal_symbol(babel_locale, numbering_system=system.value),
        grouping_separator=numbers.get_group_symbol(babel_locale, numbering_system=system.value),
        primary_grouping_size=primary,
        secondary_grouping_size=secondary,
        min_grouping_digits=_min_grouping_digits(identifier),
        numbering_system=system,
        plus_sign=numbers.get_plus_sign_symbol(babel_locale, numbering_system=system.value),
        minus_sign=numbers.get_minus_sign_symbol(babel_locale, numbering_system=system.value),
    )


class CLDRFormatTable:
    """FormatTable built from Babel's CLDR locale data.

    Each rule set uses the locale's standard currency pattern and the number
    symbols of its default numbering system. Rule sets are built on first
    lookup and cached process-wide; the cache is read-only once populated.

    Example:
        >>> fmt = CLDR_FORMATS.lookup("de")
        >>> fmt.decimal_separator, fmt.grouping_separator
        (',', '.')
        >>> CLDR_FORMATS.lookup("xx") is None
        True
    """

    __slots__ = ()

    def lookup(self, identifier: str) -> CurrencyFormat | None:
        """Return the rule set for an exact CLDR identifier, or None.

        Raises:
            BabelImportError: If Babel is not installed
        """
        return _load_cldr_format(identifier)

    def __repr__(self) -> str:
        return "CLDRFormatTable()"


CLDR_FORMATS = CLDRFormatTable()


def clear_format_cache() -> None:
    """Clear cached CLDR rule sets and parsed patterns."""
    _load_cldr_format.cache_clear()
    parse_pattern.cache_clear()
