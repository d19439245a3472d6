from dataclasses import dataclass
from enum import Enum

from models.ledger_date import LedgerDate


class Kind(Enum):
    """Whether a record brings money in or sends it out."""

    INCOME = "Income"
    EXPENSE = "Expense"

    @classmethod
    def parse(cls, text: str) -> "Kind":
        """Look up a kind by its value, ignoring case.

        Raises:
            ValueError: If text names neither kind.
        """
        normalized = text.strip().lower()
        for kind in cls:
            if kind.value.lower() == normalized:
                return kind
        raise ValueError(f"Unknown kind: {text}")


@dataclass(frozen=True)
class Record:
    id: int  # assigned by RecordStore, never reused
    date: LedgerDate
    category: str
    amount: float  # non-negative by convention, not validated
    description: str
    kind: Kind


@dataclass(frozen=True)
class NewRecord:
    """A record that has not been given an id yet (e.g. parsed from a seed file)."""

    date: LedgerDate
    category: str
    amount: float
    description: str
    kind: Kind
