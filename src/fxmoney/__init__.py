"""
fxmoney — Multi-currency Money with deferred conversion

================================================================================
QUICK START
================================================================================

    from fxmoney import Money, Currency, Bank

    # Adding different currencies does not convert anything yet
    total = Money.dollar(5) + Money.franc(10)

    # The Bank knows the rates: 2 francs buy 1 dollar
    bank = Bank()
    bank.add_rate(Currency.FRANC, Currency.DOLLAR, 2)

    bank.reduce(total, Currency.DOLLAR)             # Money.dollar(10)
    bank.reduce(total.times(2), Currency.DOLLAR)    # Money.dollar(20)

Missing rates:

    from fxmoney import UnknownExchangeRate

    try:
        Bank().reduce(Money.franc(1), Currency.DOLLAR)
    except UnknownExchangeRate as exc:
        print(exc.from_currency, exc.to_currency)

    Bank().exchange(1, Currency.FRANC, Currency.DOLLAR)   # None

================================================================================
"""

from .core import (
    Money,
    Currency,
)

from .bank import Bank

from .errors import (
    MoneyError,
    UnknownExchangeRate,
)

from .logging_config import configure_logging, get_logger

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Core
    "Money",
    "Currency",
    "Bank",
    # Errors
    "MoneyError",
    "UnknownExchangeRate",
    # Logging
    "configure_logging",
    "get_logger",
]
