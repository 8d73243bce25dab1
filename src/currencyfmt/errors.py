"""currencyfmt exception hierarchy.

Only the collaborators raise: Amount rejects malformed numbers and currency
codes, and the Formatter rejects invalid option values. Formatting itself is
total and never raises for unknown locales, currencies or display modes.

Zero external dependencies.
"""

__all__ = [
    "CurrencyError",
    "InvalidCurrencyCodeError",
    "InvalidNumberError",
]


class CurrencyError(Exception):
    """Base exception for all currencyfmt errors."""


class InvalidNumberError(CurrencyError, ValueError):
    """Amount number is not a finite decimal.

    Attributes:
        number: The rejected input value
    """

    def __init__(self, number: object) -> None:
        """Initialize InvalidNumberError.

        Args:
            number: The rejected input value
        """
        super().__init__(f"invalid number {number!r}")
        self.number = number


class InvalidCurrencyCodeError(CurrencyError, ValueError):
    """Currency code is not three ASCII letters.

    Attributes:
        currency_code: The rejected currency code
    """

    def __init__(self, currency_code: object) -> None:
        """Initialize InvalidCurrencyCodeError.

        Args:
            currency_code: The rejected currency code
        """
        super().__init__(f"invalid currency code {currency_code!r}")
        self.currency_code = currency_code
