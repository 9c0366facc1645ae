"""
bank.py — Exchange-rate registry and reduction of multi-currency sums

================================================================================
RATE DIRECTION
================================================================================

A rate stored with add_rate(FROM, TO, r) is kept under the ordered key
(FROM, TO) and applied as:

    exchange(x, FROM, TO) == x / r
    exchange(x, TO, FROM) == x * r

So add_rate(Currency.FRANC, Currency.DOLLAR, 2) means 2 francs buy 1 dollar.
The reverse direction is always derived, never stored: for each pair of
distinct currencies at most one key exists, and the first registration
wins. Same-currency conversion is implicit at rate 1.

================================================================================
"""

from __future__ import annotations
from threading import Lock
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple

from .core import Amount, Currency, Money
from .errors import UnknownExchangeRate
from .logging_config import get_logger

logger = get_logger(__name__)

RateKey = Tuple[Currency, Currency]


class Bank:
    """
    Holds exchange rates and reduces Money to a single currency.

    INVARIANTS:
    - for any two distinct currencies, at most one of (a, b) / (b, a) is stored
    - a stored rate is never replaced or removed
    - (c, c) is never stored

    add_rate() runs its check-then-insert under a lock. Readers take no lock.
    """

    def __init__(self):
        self._rates: Dict[RateKey, Amount] = {}
        self._lock = Lock()

    @classmethod
    def with_rates(cls, rates: Iterable[Tuple[Currency, Currency, Amount]]) -> Bank:
        """Build a Bank from (from, to, rate) triples, first registration wins."""
        bank = cls()
        for from_currency, to_currency, rate in rates:
            bank.add_rate(from_currency, to_currency, rate)
        return bank

    # -------------------------------------------------------------------------
    # Rate table
    # -------------------------------------------------------------------------

    def add_rate(self, from_currency: Currency, to_currency: Currency, rate: Amount) -> bool:
        """
        Register a rate for (from_currency, to_currency).

        Returns:
            True if the rate was stored, False if it was ignored because the
            pair (in either direction) already has a rate, or because both
            currencies are the same.

        Raises:
            ValueError: if rate is not positive
        """
        try:
            positive = rate > 0
        except ArithmeticError as exc:
            raise ValueError(f"Exchange rate must be positive, got {rate!r}") from exc
        if not positive:
            raise ValueError(f"Exchange rate must be positive, got {rate!r}")

        log = logger.bind(
            from_currency=from_currency.code,
            to_currency=to_currency.code,
            rate=str(rate),
        )

        if from_currency == to_currency:
            log.warning("rate_ignored", reason="same_currency")
            return False

        with self._lock:
            if (from_currency, to_currency) in self._rates or (to_currency, from_currency) in self._rates:
                log.warning("rate_ignored", reason="already_registered")
                return False
            self._rates[(from_currency, to_currency)] = rate

        log.debug("rate_registered")
        return True

    def rate(self, from_currency: Currency, to_currency: Currency) -> Optional[Amount]:
        """Stored rate for exactly this ordered pair, or None."""
        return self._rates.get((from_currency, to_currency))

    @property
    def rates(self) -> Mapping[RateKey, Amount]:
        """Read-only snapshot of the stored rates."""
        return MappingProxyType(dict(self._rates))

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def exchange(self, amount: Amount, from_currency: Currency, to_currency: Currency) -> Optional[Amount]:
        """
        Convert amount from one currency to another.

        Returns None when no rate is known in either direction.
        """
        if from_currency == to_currency:
            return amount
        rate = self._rates.get((from_currency, to_currency))
        if rate is not None:
            return amount / rate
        rate = self._rates.get((to_currency, from_currency))
        if rate is not None:
            return amount * rate
        return None

    def reduce(self, money: Money, to: Currency) -> Money:
        """
        Collapse every entry of money into a single amount in `to`.

        Raises:
            UnknownExchangeRate: if any entry's currency cannot be converted
        """
        total = 0
        for currency, amount in money:
            converted = self.exchange(amount, currency, to)
            if converted is None:
                logger.error(
                    "exchange_rate_missing",
                    from_currency=currency.code,
                    to_currency=to.code,
                )
                raise UnknownExchangeRate(currency, to)
            total = total + converted

        logger.debug("money_reduced", entries=len(money), to=to.code, total=str(total))
        return Money.of(total, to)

    def __repr__(self) -> str:
        pairs = ", ".join(
            f"{src.code}->{dst.code}={rate}" for (src, dst), rate in self._rates.items()
        )
        return f"Bank({pairs})"
