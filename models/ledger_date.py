"""Calendar-free date used to stamp ledger records."""

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class LedgerDate:
    """A (day, month, year) triple ordered by (year, month, day).

    No calendar validation is done, so 31/2/2025 is a valid LedgerDate.

    Attributes:
        day: Day of month (1-31).
        month: Month (1-12).
        year: Year (positive).
    """

    day: int
    month: int
    year: int

    def sort_key(self) -> tuple:
        return (self.year, self.month, self.day)

    def __lt__(self, other: "LedgerDate") -> bool:
        if not isinstance(other, LedgerDate):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"

    @classmethod
    def parse(cls, text: str) -> "LedgerDate":
        """Parse a date written as d/m/yyyy.

        Raises:
            ValueError: If text is not three slash-separated integers.
        """
        parts = text.strip().split("/")
        if len(parts) != 3:
            raise ValueError(f"Invalid date '{text}', expected d/m/yyyy")
        day, month, year = (int(part) for part in parts)
        return cls(day=day, month=month, year=year)
