"""Shared fixtures and Hypothesis strategies."""

import pytest
from hypothesis import strategies as st

from fxmoney import Bank, Currency, Money


currencies = st.sampled_from(list(Currency))
amounts = st.integers(min_value=-1_000_000, max_value=1_000_000)
rates = st.integers(min_value=1, max_value=1_000)
exact_amounts = st.fractions(min_value=-10_000, max_value=10_000, max_denominator=1_000)


@st.composite
def money_strategy(draw, currency=None, amount=amounts):
    """Single-entry Money."""
    if currency is None:
        currency = draw(currencies)
    return Money.of(draw(amount), currency)


@st.composite
def mixed_money_strategy(draw, amount=amounts, max_entries=6):
    """Money with one or more entries in any currency."""
    parts = draw(st.lists(money_strategy(amount=amount), min_size=1, max_size=max_entries))
    total = parts[0]
    for part in parts[1:]:
        total = total + part
    return total


@pytest.fixture
def bank() -> Bank:
    """Bank where 2 francs buy 1 dollar."""
    bank = Bank()
    bank.add_rate(Currency.FRANC, Currency.DOLLAR, 2)
    return bank
