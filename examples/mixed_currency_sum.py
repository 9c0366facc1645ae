#!/usr/bin/env python3
"""
mixed_currency_sum.py — Adding dollars and francs

================================================================================
THE IDEA
================================================================================

    $5 + 10 CHF = ?

There is no answer until someone says which currency the answer should be
in, and at what rate. So Money does not try: adding two Money values keeps
both amounts side by side, and a Bank reduces the sum when asked.

    total = Money.dollar(5) + Money.franc(10)      # 5 USD + 10 CHF
    bank.reduce(total, Currency.DOLLAR)            # 10 USD at 2 CHF/USD

Run with the package installed (pip install -e .).

================================================================================
"""

from fractions import Fraction

from fxmoney import Bank, Currency, Money, UnknownExchangeRate, configure_logging


def demonstrate_deferred_sum(bank: Bank):
    print("=" * 60)
    print("DEFERRED SUM")
    print("=" * 60)

    total = Money.dollar(5) + Money.franc(10) + Money.dollar(5)
    print(f"total               = {total}")
    print(f"reduce(total, USD)  = {bank.reduce(total, Currency.DOLLAR)}")
    print(f"reduce(total, CHF)  = {bank.reduce(total, Currency.FRANC)}")
    print(f"total.times(2)      = {total.times(2)}")
    print()


def demonstrate_structural_equality(bank: Bank):
    print("=" * 60)
    print("EQUALITY IS STRUCTURAL")
    print("=" * 60)

    a = Money.dollar(5) + Money.franc(0)
    b = Money.dollar(5)
    print(f"{a} == {b}: {a == b}")
    same = bank.reduce(a, Currency.DOLLAR) == bank.reduce(b, Currency.DOLLAR)
    print(f"after reduce to USD: {same}")
    print()


def demonstrate_rate_policy():
    print("=" * 60)
    print("FIRST RATE WINS")
    print("=" * 60)

    bank = Bank()
    print(f"add_rate(CHF, USD, 2): {bank.add_rate(Currency.FRANC, Currency.DOLLAR, 2)}")
    print(f"add_rate(USD, CHF, 3): {bank.add_rate(Currency.DOLLAR, Currency.FRANC, 3)}")
    print(f"stored: {bank}")
    print()


def demonstrate_exact_amounts():
    print("=" * 60)
    print("EXACT AMOUNTS")
    print("=" * 60)

    bank = Bank()
    bank.add_rate(Currency.FRANC, Currency.DOLLAR, Fraction(3))
    result = bank.reduce(Money.franc(Fraction(1)) + Money.franc(Fraction(2)), Currency.DOLLAR)
    print(f"1 CHF + 2 CHF at 3 CHF/USD = {result}")
    print()


def demonstrate_missing_rate():
    print("=" * 60)
    print("MISSING RATE")
    print("=" * 60)

    bank = Bank()
    print(f"exchange(1, CHF, USD) = {bank.exchange(1, Currency.FRANC, Currency.DOLLAR)}")
    try:
        bank.reduce(Money.franc(1), Currency.DOLLAR)
    except UnknownExchangeRate as exc:
        print(f"reduce raised: {exc}")
    print()


def main():
    configure_logging(level="WARNING")

    bank = Bank()
    bank.add_rate(Currency.FRANC, Currency.DOLLAR, 2)

    demonstrate_deferred_sum(bank)
    demonstrate_structural_equality(bank)
    demonstrate_rate_policy()
    demonstrate_exact_amounts()
    demonstrate_missing_rate()


if __name__ == "__main__":
    main()
