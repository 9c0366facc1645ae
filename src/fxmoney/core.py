"""
core.py — Multi-currency Money value object

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   A Money is an ordered tuple of (Currency, amount) entries.
   A single-currency Money has one entry; a sum of Money values in
   different currencies keeps one entry per operand. Nothing is coalesced.

2. DEFERRED CONVERSION
   Addition never converts. Money.dollar(5) + Money.franc(10) is a Money
   with two entries; only Bank.reduce() turns it into a single amount.

3. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance.

4. STRUCTURAL EQUALITY
   Two Money values are equal iff their entries are equal in order and
   length. Money.dollar(5) + Money.franc(0) != Money.dollar(5).
   Compare economic value by reducing both sides with the same Bank.

5. AMOUNT TYPE
   Amounts are whatever numeric type the caller uses (int, float, Decimal,
   Fraction). Money does not round and does not coerce.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from numbers import Number
from typing import Iterable, Iterator, Tuple, Union


# ==============================================================================
# CURRENCY DEFINITIONS
# ==============================================================================

class Currency(Enum):
    """
    Supported currencies.

    The set is closed: a Bank can only hold rates between these members.
    """
    DOLLAR = "USD"
    FRANC = "CHF"

    @property
    def code(self) -> str:
        """ISO 4217 alphabetic code."""
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Currency:
        for currency in cls:
            if currency.code == code.upper():
                return currency
        raise ValueError(f"Unsupported currency code: {code!r}")


Amount = Union[int, float, Decimal, Fraction]
Entry = Tuple[Currency, Amount]


# ==============================================================================
# MONEY CLASS
# ==============================================================================

@dataclass(frozen=True, slots=True)
class Money:
    """
    An unreduced sum of amounts, each tagged with its currency.

    INVARIANTS:
    1. _entries is a tuple; order is the order in which operands were added
    2. entries with the same currency are never merged
    3. times() scales every entry by the same factor

    USAGE:
        total = Money.dollar(5) + Money.franc(10)
        bank = Bank()
        bank.add_rate(Currency.FRANC, Currency.DOLLAR, 2)
        bank.reduce(total, Currency.DOLLAR)   # Money.dollar(10)
    """
    _entries: Tuple[Entry, ...]

    def __post_init__(self):
        entries = tuple(tuple(entry) for entry in self._entries)
        for entry in entries:
            if len(entry) != 2 or not isinstance(entry[0], Currency):
                raise TypeError(
                    f"Money entries must be (Currency, amount) pairs, got {entry!r}"
                )
        object.__setattr__(self, "_entries", entries)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, amount: Amount, currency: Currency) -> Money:
        """Single-entry Money in the given currency."""
        return cls(_entries=((currency, amount),))

    @classmethod
    def from_entries(cls, entries: Iterable[Entry]) -> Money:
        """Money with the given (currency, amount) entries, in order."""
        return cls(_entries=tuple(entries))

    @classmethod
    def empty(cls) -> Money:
        """Money with no entries. Reduces to zero in any currency."""
        return cls(_entries=())

    @classmethod
    def dollar(cls, amount: Amount) -> Money:
        return cls.of(amount, Currency.DOLLAR)

    @classmethod
    def franc(cls, amount: Amount) -> Money:
        return cls.of(amount, Currency.FRANC)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def times(self, factor: Amount) -> Money:
        """
        Scale every entry by factor.

        Currencies and entry order are unchanged:
            (dollar(5) + franc(10)).times(2) == dollar(10) + franc(20)
        """
        return Money(_entries=tuple(
            (currency, amount * factor) for currency, amount in self._entries
        ))

    def __add__(self, other: Money) -> Money:
        """Concatenate entries, self first. No conversion happens here."""
        if not isinstance(other, Money):
            raise TypeError(
                f"Operation not allowed: Money + {type(other).__name__}. "
                f"Wrap the amount with Money.of() first."
            )
        return Money(_entries=self._entries + other._entries)

    def __mul__(self, factor: Amount) -> Money:
        if isinstance(factor, Money) or not isinstance(factor, Number):
            return NotImplemented
        return self.times(factor)

    def __rmul__(self, factor: Amount) -> Money:
        return self.__mul__(factor)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return self._entries == other._entries
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._entries)

    # -------------------------------------------------------------------------
    # Properties and output
    # -------------------------------------------------------------------------

    @property
    def entries(self) -> Tuple[Entry, ...]:
        """(currency, amount) pairs in the order they were added."""
        return self._entries

    @property
    def currencies(self) -> Tuple[Currency, ...]:
        """Distinct currencies, in first-seen order."""
        return tuple(dict.fromkeys(currency for currency, _ in self._entries))

    def is_single_currency(self) -> bool:
        return len(self.currencies) == 1

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        if not self._entries:
            return "Money()"
        return " + ".join(
            f"{amount} {currency.code}" for currency, amount in self._entries
        )

    def __str__(self) -> str:
        return self.__repr__()
