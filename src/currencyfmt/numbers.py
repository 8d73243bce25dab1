"""Digit grouping and digit-glyph localization.

Both operate on plain ASCII digit strings produced by Amount.number and are
pure functions of their arguments.
"""

from __future__ import annotations

from currencyfmt.enums import NumberingSystem

__all__ = [
    "NUMBERING_SYSTEM_DIGITS",
    "group_digits",
    "localize_digits",
]

_ASCII_DIGITS = "0123456789"


def _digits_from(zero: int) -> str:
    """Ten consecutive code points starting at the script's zero digit."""
    return "".join(chr(zero + offset) for offset in range(10))


# Every supported script encodes its digits contiguously from zero.
NUMBERING_SYSTEM_DIGITS: dict[NumberingSystem, str] = {
    NumberingSystem.LATN: _ASCII_DIGITS,
    NumberingSystem.ARAB: _digits_from(0x0660),  # ٠١٢٣٤٥٦٧٨٩
    NumberingSystem.ARABEXT: _digits_from(0x06F0),  # ۰۱۲۳۴۵۶۷۸۹
    NumberingSystem.BENG: _digits_from(0x09E6),  # ০১২৩৪৫৬৭৮৯
    NumberingSystem.DEVA: _digits_from(0x0966),  # ०१२३४५६७८९
    NumberingSystem.MYMR: _digits_from(0x1040),  # ၀၁၂၃၄၅၆၇၈၉
    NumberingSystem.TIBT: _digits_from(0x0F20),  # ༠༡༢༣༤༥༦༧༨༩
    NumberingSystem.OLCK: _digits_from(0x1C50),
    NumberingSystem.MTEI: _digits_from(0xABF0),
}

_TRANSLATIONS: dict[NumberingSystem, dict[int, int]] = {
    system: str.maketrans(_ASCII_DIGITS, digits)
    for system, digits in NUMBERING_SYSTEM_DIGITS.items()
    if system is not NumberingSystem.LATN
}


def group_digits(
    digits: str,
    separator: str,
    *,
    primary_size: int,
    secondary_size: int,
    min_grouping_digits: int,
) -> str:
    """Insert grouping separators into an integer digit string.

    The rightmost group has ``primary_size`` digits and every group to its
    left has ``secondary_size`` digits (the leftmost may be shorter), so both
    ``1,234,567`` and Indian ``12,34,567`` grouping are supported.

    Args:
        digits: Unsigned ASCII integer digits
        separator: Grouping separator glyph(s)
        primary_size: Size of the rightmost group; 0 disables grouping
        secondary_size: Size of the remaining groups; 0 means primary_size
        min_grouping_digits: Grouping applies only when there are at least
            this many digits left of the primary group

    Returns:
        Grouped digits, or the input unchanged if it is too short to group

    Examples:
        >>> group_digits("1234567", ",", primary_size=3, secondary_size=3, min_grouping_digits=1)
        '1,234,567'
        >>> group_digits("1234567", ",", primary_size=3, secondary_size=2, min_grouping_digits=1)
        '12,34,567'
        >>> group_digits("1234", ".", primary_size=3, secondary_size=3, min_grouping_digits=2)
        '1234'
    """
    if primary_size <= 0:
        return digits
    num_digits = len(digits)
    if num_digits < min_grouping_digits + primary_size:
        return digits
    if secondary_size <= 0:
        secondary_size = primary_size

    # Digits are grouped from right to left.
    # First the primary group, then the secondary groups.
    groups = [digits[num_digits - primary_size :]]
    high = num_digits - primary_size
    while high > 0:
        low = max(high - secondary_size, 0)
        groups.append(digits[low:high])
        high = low
    groups.reverse()
    return separator.join(groups)


def localize_digits(text: str, numbering_system: NumberingSystem | str) -> str:
    """Replace ASCII digits with the numbering system's digit glyphs.

    Non-digit characters (separators, signs, literal text) are untouched.
    Latin and unrecognised systems return the input unchanged.

    Examples:
        >>> localize_digits("1,234.50", NumberingSystem.ARAB)
        '١,٢٣٤.٥٠'
    """
    if numbering_system == NumberingSystem.LATN:
        return text
    table = _TRANSLATIONS.get(numbering_system)  # type: ignore[call-overload]
    if table is None:
        return text
    return text.translate(table)
