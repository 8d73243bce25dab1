"""Enumerations for currencyfmt type-safe constants.

Uses StrEnum for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.
"""

from enum import StrEnum


class CurrencyDisplay(StrEnum):
    """How the currency is shown next to a formatted amount.

    StrEnum provides automatic string conversion: str(CurrencyDisplay.CODE) == "code"
    """

    SYMBOL = "symbol"
    """Locale symbol, or the Formatter's symbol_map override: $1,234.50"""

    CODE = "code"
    """ISO 4217 code: USD1,234.50"""

    NONE = "none"
    """Currency hidden: 1,234.50"""


class NumberingSystem(StrEnum):
    """CLDR numbering system used to render digits.

    Values are the CLDR numbering system identifiers, so members compare equal
    to Babel's ``Locale.default_numbering_system`` strings.
    """

    LATN = "latn"
    """Western Arabic digits: 0123456789"""

    ARAB = "arab"
    """Arabic-Indic digits"""

    ARABEXT = "arabext"
    """Extended Arabic-Indic digits (Persian, Urdu)"""

    BENG = "beng"
    """Bengali digits"""

    DEVA = "deva"
    """Devanagari digits"""

    MYMR = "mymr"
    """Myanmar digits"""

    TIBT = "tibt"
    """Tibetan digits"""

    OLCK = "olck"
    """Ol Chiki digits (Santali)"""

    MTEI = "mtei"
    """Meetei Mayek digits (Manipuri)"""


__all__ = [
    "CurrencyDisplay",
    "NumberingSystem",
]
