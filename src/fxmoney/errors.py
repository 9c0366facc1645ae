"""
Exceptions raised by fxmoney.
"""

from __future__ import annotations

from .core import Currency


class MoneyError(Exception):
    """Base class for fxmoney errors."""


class UnknownExchangeRate(MoneyError, LookupError):
    """
    No rate is known between two currencies, in either direction.

    Raised by Bank.reduce(). Bank.exchange() reports the same condition
    by returning None instead.
    """

    def __init__(self, from_currency: Currency, to_currency: Currency):
        self.from_currency = from_currency
        self.to_currency = to_currency
        super().__init__(
            f"No exchange rate from {from_currency.code} to {to_currency.code}"
        )

    def __reduce__(self):
        return (type(self), (self.from_currency, self.to_currency))
