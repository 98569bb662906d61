from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

CENT = Decimal("0.01")

# Net balance per name, in first-occurrence order.
Balance = dict[str, Decimal]


@dataclass(slots=True, frozen=True)
class Expense:
    amount: Optional[Decimal]
    payer: Optional[str]
    participants: Optional[Sequence[str]]
    title: Optional[str] = None
