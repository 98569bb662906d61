from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from splitter.models import CENT, Expense

AMOUNT_RE = re.compile(r"^\d+(?:[.,]\d{1,2})?$")


def parse_amount(text: str) -> Decimal:
    """
    Parse a money amount typed by a person.

    Accepted: "12", "12.5", "12,50". At most two fractional digits,
    no sign, no currency.
    """
    value = text.strip()
    if not AMOUNT_RE.match(value):
        raise ValueError(f"invalid amount: {text!r}")
    try:
        amount = Decimal(value.replace(",", "."))
    except InvalidOperation as exc:
        raise ValueError(f"invalid amount: {text!r}") from exc
    return amount.quantize(CENT)


def parse_participants(text: str) -> list[str]:
    names = []
    for token in re.split(r"[\s,]+", text.strip()):
        name = token.lstrip("@")
        if name:
            names.append(name)
    return names


def parse_expense(line: str) -> Expense:
    # <payer> | <amount> | <participants> [| <title>]
    parts = [part.strip() for part in line.split("|")]
    if len(parts) < 3:
        raise ValueError("expected '<payer> | <amount> | <participants> [| <title>]'")

    payers = parse_participants(parts[0])
    if not payers:
        raise ValueError("payer must not be empty")
    if len(payers) > 1:
        raise ValueError(f"expected a single payer, got {parts[0]!r}")
    payer = payers[0]

    title = parts[3] if len(parts) > 3 and parts[3] else None
    return Expense(
        amount=parse_amount(parts[1]),
        payer=payer,
        participants=parse_participants(parts[2]),
        title=title,
    )
