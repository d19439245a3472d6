"""Aggregate statistics model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Statistics:
    """Read-only snapshot of the ledger totals.

    Attributes:
        count: Number of live records.
        total_income: Sum of Income amounts.
        total_expenses: Sum of Expense amounts.
        net_balance: total_income - total_expenses.
        category_count: Number of category entries, emptied ones included.
    """

    count: int
    total_income: float
    total_expenses: float
    net_balance: float
    category_count: int
