"""Helper utilities for tests."""

from typing import List

from models.ledger_date import LedgerDate
from models.record import Kind, NewRecord

SAMPLE_RECORDS = [
    NewRecord(LedgerDate(1, 11, 2025), "Food", 250.50, "Lunch at Café", Kind.EXPENSE),
    NewRecord(LedgerDate(4, 11, 2025), "Transport", 100.0, "Uber Ride", Kind.EXPENSE),
    NewRecord(LedgerDate(7, 11, 2025), "Food", 650.0, "Groceries", Kind.EXPENSE),
    NewRecord(
        LedgerDate(10, 11, 2025), "Entertainment", 500.0, "Movie Tickets", Kind.EXPENSE
    ),
    NewRecord(
        LedgerDate(12, 11, 2025), "Utilities", 1500.0, "Electricity Bill", Kind.EXPENSE
    ),
    NewRecord(LedgerDate(15, 11, 2025), "Salary", 20000.0, "November salary", Kind.INCOME),
]


def add_sample_records(store) -> List[int]:
    """Add the six sample November 2025 records to a store.

    Args:
        store: RecordStore to populate.

    Returns:
        The ids assigned (1 through 6 on an empty store).
    """
    return store.bulk_add(SAMPLE_RECORDS)


def assert_index_consistent(store) -> None:
    """Assert the category mapping holds exactly the records of the main sequence."""
    main_ids = [r.id for r in store.find_all()]
    assert len(main_ids) == len(set(main_ids)), "duplicate ids in main sequence"

    indexed_ids = []
    for category in store.categories():
        for record in store.find_by_category(category):
            assert record.category == category
            indexed_ids.append(record.id)

    assert sorted(indexed_ids) == sorted(main_ids)
