"""Read-only queries over the record store."""

from typing import Dict, List, Optional

from models.ledger_date import LedgerDate
from models.record import Kind, Record
from models.statistics import Statistics


class QueryEngine:
    """Service for querying records.

    Nothing here mutates the store. Queries that match nothing return an
    empty list.
    """

    def __init__(self, store):
        """Initialize the query engine.

        Args:
            store: RecordStore to read from.
        """
        self.store = store

    def all(self) -> List[Record]:
        return self.store.find_all()

    def by_category(self, category: str) -> List[Record]:
        return self.store.find_by_category(category)

    def monthly_total(self, month: int, year: int, kind: Optional[Kind] = None) -> float:
        """Sum amounts for a month.

        Args:
            month: Month (1-12).
            year: Year (e.g., 2025).
            kind: Optional kind to restrict the sum to.

        Returns:
            Total amount of the matching records.
        """
        total = 0.0
        for record in self.store.find_all():
            if record.date.month != month or record.date.year != year:
                continue
            if kind is None or record.kind is kind:
                total += record.amount
        return total

    def category_summary(self) -> Dict[str, float]:
        """Get total expense amount per category.

        Income records are left out, so an income-only category reports 0.0.

        Returns:
            Dictionary mapping category name to expense total, in the order
            categories were first seen.
        """
        summary = {}
        for category in self.store.categories():
            total = 0.0
            for record in self.store.find_by_category(category):
                if record.kind is Kind.EXPENSE:
                    total += record.amount
            summary[category] = total
        return summary

    def by_date_range(self, start: LedgerDate, end: LedgerDate) -> List[Record]:
        """Get records dated within [start, end], both ends inclusive."""
        return [r for r in self.store.find_all() if start <= r.date <= end]

    def by_amount_range(self, minimum: float, maximum: float) -> List[Record]:
        """Get records with amount within [minimum, maximum], both ends inclusive."""
        return [r for r in self.store.find_all() if minimum <= r.amount <= maximum]

    def by_keyword(self, keyword: str) -> List[Record]:
        """Get records whose description contains keyword.

        Matching is a case-sensitive substring search.
        """
        return [r for r in self.store.find_all() if keyword in r.description]

    def top_expenses(self, n: int = 5) -> List[Record]:
        """Get the n largest expenses, largest first.

        Ties keep their insertion order. The rank of a record is its position
        in the returned list plus one.

        Args:
            n: Maximum number of records to return.

        Returns:
            Up to n Expense records sorted by amount descending.
        """
        expenses = [r for r in self.store.find_all() if r.kind is Kind.EXPENSE]
        expenses.sort(key=lambda r: r.amount, reverse=True)
        return expenses[: max(n, 0)]

    def total_income(self) -> float:
        return self._total_for(Kind.INCOME)

    def total_expenses(self) -> float:
        return self._total_for(Kind.EXPENSE)

    def transaction_count(self) -> int:
        return len(self.store)

    def statistics(self) -> Statistics:
        """Get a snapshot of the ledger totals."""
        income = self.total_income()
        expenses = self.total_expenses()
        return Statistics(
            count=self.transaction_count(),
            total_income=income,
            total_expenses=expenses,
            net_balance=income - expenses,
            category_count=len(self.store.categories()),
        )

    def _total_for(self, kind: Kind) -> float:
        return sum((r.amount for r in self.store.find_all() if r.kind is kind), 0.0)
