"""Monetary amounts: a finite decimal bound to a currency code.

Amounts are immutable. Arithmetic uses ``decimal.Decimal`` with a context
sized to the operands, so no digits are lost to the default 28-digit
precision. Rounding and negation never change the currency code.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Context, Decimal, InvalidOperation

from currencyfmt.constants import ISO_CURRENCY_CODE_LENGTH
from currencyfmt.errors import InvalidCurrencyCodeError, InvalidNumberError

__all__ = ["Amount"]


def _to_decimal(number: object) -> Decimal:
    """Coerce str/int/Decimal input to a finite Decimal."""
    # bool is an int subclass; float loses precision before it gets here.
    if isinstance(number, bool) or not isinstance(number, str | int | Decimal):
        raise InvalidNumberError(number)
    try:
        value = Decimal(number.strip()) if isinstance(number, str) else Decimal(number)
    except InvalidOperation:
        raise InvalidNumberError(number) from None
    if not value.is_finite():
        raise InvalidNumberError(number)
    return value


def _normalize_currency_code(currency_code: object) -> str:
    if (
        not isinstance(currency_code, str)
        or len(currency_code) != ISO_CURRENCY_CODE_LENGTH
        or not currency_code.isascii()
        or not currency_code.isalpha()
    ):
        raise InvalidCurrencyCodeError(currency_code)
    return currency_code.upper()


def _exact_context(*operands: Decimal) -> Context:
    """Context with enough precision to hold the exact product of operands."""
    digits = sum(len(operand.as_tuple().digits) for operand in operands)
    return Context(prec=max(digits, 28), rounding=ROUND_HALF_UP)


@dataclass(frozen=True, slots=True, init=False)
class Amount:
    """A decimal number in a specific currency.

    Attributes:
        value: The exact decimal value
        currency_code: Uppercase ISO 4217 code (e.g., 'USD')

    Examples:
        >>> Amount("1234.5", "usd")
        Amount(value=Decimal('1234.5'), currency_code='USD')
        >>> Amount("1234.5", "USD").round_to(2).number
        '1234.50'
    """

    value: Decimal
    currency_code: str

    def __init__(self, number: str | int | Decimal, currency_code: str) -> None:
        """Create an Amount.

        Args:
            number: Decimal number as a string, int or Decimal
            currency_code: Three-letter currency code (case-insensitive)

        Raises:
            InvalidNumberError: If number is not a finite decimal
            InvalidCurrencyCodeError: If currency_code is not three ASCII letters
        """
        object.__setattr__(self, "value", _to_decimal(number))
        object.__setattr__(self, "currency_code", _normalize_currency_code(currency_code))

    @property
    def number(self) -> str:
        """Fixed-point decimal string, never in exponent notation."""
        return format(self.value, "f")

    def to_decimal(self) -> Decimal:
        """Return the underlying Decimal."""
        return self.value

    def is_negative(self) -> bool:
        """True for amounts below zero (negative zero is not negative)."""
        return self.value < 0

    def is_positive(self) -> bool:
        """True for amounts above zero."""
        return self.value > 0

    def is_zero(self) -> bool:
        """True for zero amounts of either sign."""
        return self.value.is_zero()

    def mul(self, factor: str | int | Decimal) -> Amount:
        """Multiply by a decimal factor, keeping the currency.

        Raises:
            InvalidNumberError: If factor is not a finite decimal
        """
        operand = _to_decimal(factor)
        product = _exact_context(self.value, operand).multiply(self.value, operand)
        return Amount(product, self.currency_code)

    def round_to(self, digits: int) -> Amount:
        """Round half away from zero to the given number of fraction digits.

        The result always carries exactly ``digits`` fraction digits, and a
        value that rounds to zero loses its sign (-0.001 -> 0.00).

        Raises:
            ValueError: If digits is negative
        """
        if digits < 0:
            msg = f"digits must be non-negative, got {digits}"
            raise ValueError(msg)
        exponent = Decimal(1).scaleb(-digits)
        context = Context(
            prec=max(self.value.adjusted(), 0) + digits + 2, rounding=ROUND_HALF_UP
        )
        rounded = self.value.quantize(exponent, context=context)
        if rounded.is_zero():
            rounded = rounded.copy_abs()
        return Amount(rounded, self.currency_code)

    def round(self) -> Amount:
        """Round to the currency's default number of fraction digits.

        Unknown currencies have zero default digits.

        Raises:
            BabelImportError: If Babel is not installed
        """
        # Deferred: currency metadata is CLDR-backed
        from currencyfmt.currency import get_digits  # noqa: PLC0415

        digits, _ = get_digits(self.currency_code)
        return self.round_to(digits)

    def __str__(self) -> str:
        return f"{self.number} {self.currency_code}"
