"""YAML seed file ingestion.

Expected layout::

    records:
      - date: 1/11/2025
        category: Food
        amount: 250.50
        description: Lunch at Café
        kind: Expense
"""

from typing import Any, Dict, List, TextIO

import yaml

from models.ledger_date import LedgerDate
from models.record import Kind, NewRecord
from logger import get_logger

logger = get_logger()


def entry_to_record(entry: Dict[str, Any]) -> NewRecord:
    """Convert one YAML mapping to a NewRecord.

    Raises:
        KeyError: If a required key is missing.
        ValueError: If the date, amount or kind cannot be parsed.
    """
    return NewRecord(
        date=LedgerDate.parse(str(entry["date"])),
        category=str(entry["category"]),
        amount=float(entry["amount"]),
        description=str(entry.get("description", "")),
        kind=Kind.parse(str(entry["kind"])),
    )


def ingest(source: TextIO) -> List[NewRecord]:
    """Ingest ledger records from a YAML document."""
    records = []

    data = yaml.safe_load(source)
    if not isinstance(data, dict) or not isinstance(data.get("records"), list):
        logger.error("YAML file has no 'records' list")
        return records

    for index, entry in enumerate(data["records"], start=1):
        if not isinstance(entry, dict):
            logger.warning(f"Skipping malformed entry {index}: {entry}")
            continue

        try:
            records.append(entry_to_record(entry))
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error processing entry {index}: {entry} - {e}")
            continue

    logger.info(f"Successfully ingested {len(records)} records")
    return records
