from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Optional, Sequence

from splitter.config import get_settings
from splitter.logging import get_logger
from splitter.models import CENT, Balance, Expense
from splitter.services.validation import ExpenseValidator, validate_expense

log = get_logger(__name__)

# Floor for the context precision; raised per expense to fit the amount.
WORK_PRECISION = 60
MIN_WORK_SCALE = 8


def _ensure_key(net: dict[str, Decimal], name: Optional[str]) -> None:
    if name is None:
        return
    if name not in net:
        net[name] = Decimal(0)


def _precision_for(amount: Decimal, scale: int, count: int) -> int:
    # integer digits of the amount, fractional work digits, and headroom for
    # running sums over `count` expenses
    return amount.adjusted() + 1 + scale + len(str(count)) + 1


def _round_cents(value: Decimal) -> Decimal:
    rounded = value.quantize(CENT, rounding=ROUND_HALF_EVEN)
    if rounded.is_zero():
        # -0.00 -> 0.00
        return abs(rounded)
    return rounded


def _drift_target(balances: Balance, total: Decimal) -> str:
    """Name that absorbs the rounding drift.

    Largest creditor when the total is positive, largest debtor when it is
    negative. Ties go to the name seen first; with no candidate of the right
    sign the first name is used.
    """
    target: Optional[str] = None
    best = Decimal(0)
    for name, value in balances.items():
        if total > 0 and value > best:
            target, best = name, value
        elif total < 0 and value < best:
            target, best = name, value
    if target is None:
        target = next(iter(balances))
    return target


def compute_balances(
    expenses: Optional[Sequence[Expense]],
    *,
    work_scale: Optional[int] = None,
    validator: ExpenseValidator = validate_expense,
) -> Balance:
    """Net balance per person under an equal split of every expense.

    Positive values are owed to the person, negative values are owed by them.
    The result is rounded to cents and always sums to exactly zero.
    """
    scale = work_scale if work_scale is not None else get_settings().work_scale
    if scale < MIN_WORK_SCALE:
        raise ValueError(f"work_scale must be at least {MIN_WORK_SCALE}, got {scale}")

    if not expenses:
        return {}

    work_quantum = Decimal(1).scaleb(-scale)

    net: dict[str, Decimal] = {}
    with localcontext() as ctx:
        ctx.prec = WORK_PRECISION

        for index, expense in enumerate(expenses):
            validator(expense)

            amount = expense.amount
            participants = expense.participants
            if amount is None or not participants:
                log.debug(
                    "balances.expense_skipped",
                    index=index,
                    reason="missing amount" if amount is None else "no participants",
                )
                continue

            amount = Decimal(amount)
            ctx.prec = max(ctx.prec, _precision_for(amount, scale, len(expenses)))
            _ensure_key(net, expense.payer)
            for name in participants:
                _ensure_key(net, name)

            share = (amount / Decimal(len(participants))).quantize(work_quantum, rounding=ROUND_HALF_EVEN)
            for name in participants:
                net[name] -= share
            if expense.payer is not None:
                net[expense.payer] += amount

        balances: Balance = {name: _round_cents(value) for name, value in net.items()}
        total = sum(balances.values(), Decimal("0.00"))
        if total.is_zero():
            return balances

        target = _drift_target(balances, total)
        balances[target] = _round_cents(balances[target] - total)

    log.debug("balances.drift_corrected", target=target, drift=str(total))
    return balances
