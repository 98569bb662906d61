from __future__ import annotations

from decimal import Decimal
from typing import Protocol

from splitter.models import Expense


class ExpenseValidator(Protocol):
    def __call__(self, expense: Expense) -> None: ...


class ExpenseValidationError(ValueError):
    pass


def validate_expense(expense: Expense) -> None:
    """Default hook: every record is accepted as is."""


def strict_validator(expense: Expense) -> None:
    amount = expense.amount
    if amount is not None:
        if isinstance(amount, float):
            raise ExpenseValidationError("amount must be a Decimal, not a float")
        if isinstance(amount, bool) or not isinstance(amount, (Decimal, int)):
            raise ExpenseValidationError(f"amount must be a Decimal, got {type(amount).__name__}")
        if not Decimal(amount).is_finite():
            raise ExpenseValidationError("amount must be finite")
        if amount < 0:
            raise ExpenseValidationError("amount must be non-negative")
    payer = expense.payer
    if not isinstance(payer, str) or not payer.strip():
        raise ExpenseValidationError("expense must have a payer")
