import dataclasses
from decimal import Decimal

import pytest

from pennywise_core.domain.models import Money
from pennywise_core.errors import CurrencyMismatchError, ValidationError


def test_add_same_currency_returns_new_value():
    a = Money(Decimal("10.00"), "GBP")
    b = Money(Decimal("5.25"), "GBP")
    total = a.add(b)
    assert total == Money(Decimal("15.25"), "GBP")
    assert a.amount == Decimal("10.00")
    assert b.amount == Decimal("5.25")


def test_add_mismatched_currency_fails():
    with pytest.raises(CurrencyMismatchError):
        Money(Decimal("10.00"), "GBP").add(Money(Decimal("5.00"), "USD"))


def test_currency_mismatch_is_a_value_error():
    with pytest.raises(ValueError, match="GBP vs USD"):
        Money("1", "GBP").add(Money("1", "USD"))


def test_add_is_commutative_and_associative():
    a = Money("0.10", "GBP")
    b = Money("0.20", "GBP")
    c = Money("1234.567", "GBP")
    assert a.add(b) == b.add(a)
    assert a.add(b).add(c) == a.add(b.add(c))
    assert a.add(b).amount == Decimal("0.30")


def test_defaults_for_missing_amount_and_currency():
    m = Money(None, None)
    assert m.amount == Decimal(0)
    assert m.currency == "GBP"


def test_float_input_does_not_drift():
    assert Money(0.1, "GBP").amount == Decimal("0.1")


@pytest.mark.parametrize(
    "money,expected",
    [
        (Money("12.50", "GBP"), "12.50 GBP"),
        (Money("0.000000001", "usd"), "0.000000001 USD"),
        (Money("-3", "EUR"), "-3 EUR"),
    ],
)
def test_str_keeps_full_precision(money, expected):
    assert str(money) == expected


@pytest.mark.parametrize("amount", ["abc", "", "NaN", "Infinity", True])
def test_invalid_amount_rejected(amount):
    with pytest.raises(ValidationError):
        Money(amount, "GBP")


@pytest.mark.parametrize("currency", ["GB", "POUND", "12A", ""])
def test_invalid_currency_rejected(currency):
    with pytest.raises(ValidationError):
        Money("1", currency)


def test_money_is_immutable():
    m = Money("1", "GBP")
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.amount = Decimal("2")


def test_zero_and_negative():
    assert Money.zero("usd") == Money("0", "USD")
    assert Money("-0.01").is_negative
    assert not Money.zero().is_negative


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1e3", "1000 GBP"),
        ("1E-9", "0.000000001 GBP"),
        ("0.0000001", "0.0000001 GBP"),
        ("2.5E+2", "250 GBP"),
    ],
)
def test_str_never_uses_exponent_form(raw, expected):
    assert str(Money(raw, "GBP")) == expected
