"""Equal-split expense balances with exact decimal arithmetic."""

from splitter.models import Balance, Expense
from splitter.services.balances import compute_balances

__all__ = ["Balance", "Expense", "compute_balances"]
