"""In-memory record store with a category index and undo."""

from typing import Dict, Iterable, List, Optional

from models.ledger_date import LedgerDate
from models.record import Kind, NewRecord, Record
from services.undo import UndoAction, UndoEntry, UndoLog
from logger import get_logger

logger = get_logger()


class RecordStore:
    """Service for recording and removing ledger records.

    Records live in two places that are always updated together: the main
    sequence (insertion order) and a mapping from category name to the records
    in that category. Every add and delete pushes its inverse onto the undo log.

    Args:
        undo_log: Optional undo log for dependency injection (testing).
    """

    def __init__(self, undo_log: Optional[UndoLog] = None):
        self.undo_log = undo_log if undo_log is not None else UndoLog()
        self._records: List[Record] = []
        self._by_category: Dict[str, List[Record]] = {}
        self._next_id = 1

    def add(
        self,
        date: LedgerDate,
        category: str,
        amount: float,
        description: str,
        kind: Kind,
    ) -> int:
        """Add a new record to the ledger.

        Args:
            date: Date of the transaction.
            category: Free-text category label.
            amount: Monetary amount (not validated).
            description: Free-text description.
            kind: Income or Expense.

        Returns:
            The id assigned to the new record.
        """
        record = Record(
            id=self._next_id,
            date=date,
            category=category,
            amount=amount,
            description=description,
            kind=kind,
        )
        self._next_id += 1

        self._append(record)
        self.undo_log.push(UndoAction.ADD, record)

        logger.debug(f"Added record {record.id} ({record.category}, {record.amount})")
        return record.id

    def bulk_add(self, new_records: Iterable[NewRecord]) -> List[int]:
        """Add several records in order.

        Each record gets its own undo entry.

        Args:
            new_records: Records to add.

        Returns:
            The ids assigned, in the same order.
        """
        return [
            self.add(r.date, r.category, r.amount, r.description, r.kind)
            for r in new_records
        ]

    def delete(self, record_id: int) -> bool:
        """Delete a record by id.

        Args:
            record_id: The id of the record to delete.

        Returns:
            True if the record was deleted, False if no record has that id.
        """
        for index, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[index]
                self._remove_from_category(record)
                self.undo_log.push(UndoAction.DELETE, record)
                logger.debug(f"Deleted record {record_id}")
                return True

        logger.debug(f"Record with ID {record_id} not found")
        return False

    def undo(self) -> Optional[UndoEntry]:
        """Reverse the most recent add or delete.

        An undone add is removed by id. An undone delete is appended to the end
        of both sequences, so it does not regain its original position. Undo
        itself is never recorded.

        Returns:
            The entry that was reversed, or None if there was nothing to undo.
        """
        entry = self.undo_log.pop()
        if entry is None:
            logger.debug("Nothing to undo")
            return None

        if entry.action is UndoAction.ADD:
            self._records = [r for r in self._records if r.id != entry.record.id]
            self._remove_from_category(entry.record)
            logger.debug(f"Undid add of record {entry.record.id}")
        else:
            self._append(entry.record)
            logger.debug(f"Undid delete of record {entry.record.id}")

        return entry

    def find(self, record_id: int) -> Optional[Record]:
        """Get a single record by id.

        Returns:
            Record if found, None otherwise.
        """
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def find_all(self) -> List[Record]:
        """Get all live records in insertion order."""
        return list(self._records)

    def find_by_category(self, category: str) -> List[Record]:
        """Get the live records of a category.

        Returns:
            List of records, empty if the category is unknown or emptied.
        """
        return list(self._by_category.get(category, []))

    def categories(self) -> List[str]:
        """Get every category seen so far, including ones with no records left."""
        return list(self._by_category)

    @property
    def undo_depth(self) -> int:
        return len(self.undo_log)

    def __len__(self) -> int:
        return len(self._records)

    def _append(self, record: Record) -> None:
        self._records.append(record)
        self._by_category.setdefault(record.category, []).append(record)

    def _remove_from_category(self, record: Record) -> None:
        # Emptied categories stay in the mapping
        members = self._by_category.get(record.category)
        if members is None:
            return
        members[:] = [r for r in members if r.id != record.id]
