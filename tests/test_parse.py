from decimal import Decimal

import pytest

from splitter.models import Expense
from splitter.utils.parse import parse_amount, parse_expense, parse_participants


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("12", Decimal("12.00")),
        ("12.5", Decimal("12.50")),
        ("12,50", Decimal("12.50")),
        ("  0.01 ", Decimal("0.01")),
    ],
)
def test_parse_amount(text, expected):
    amount = parse_amount(text)
    assert amount == expected
    assert amount.as_tuple().exponent == -2


@pytest.mark.parametrize("text", ["", "abc", "-3", "1.234", "10 EUR", "NaN", "1e3"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_parse_participants_keeps_order_and_duplicates():
    assert parse_participants("@bob, ann  bob,,@cid") == ["bob", "ann", "bob", "cid"]
    assert parse_participants("   ") == []


def test_parse_expense():
    expense = parse_expense("@ann | 30,00 | @ann @bob @cid | Пицца")
    assert expense == Expense(
        amount=Decimal("30.00"),
        payer="ann",
        participants=["ann", "bob", "cid"],
        title="Пицца",
    )


def test_parse_expense_without_title():
    assert parse_expense("ann | 5 | bob").title is None


@pytest.mark.parametrize("line", ["ann | 5", " | 5 | bob", "ann | five | bob", "ann bob | 5 | ann bob", "ann, bob | 5 | ann"])
def test_parse_expense_invalid(line):
    with pytest.raises(ValueError):
        parse_expense(line)
