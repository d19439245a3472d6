import csv
from typing import List, TextIO

from models.ledger_date import LedgerDate
from models.record import Kind, NewRecord
from logger import get_logger

logger = get_logger()

HEADER = ["Date", "Category", "Amount", "Description", "Kind"]


def row_to_record(row: List[str]) -> NewRecord:
    """Convert a CSV row to a NewRecord.

    Args:
        row: CSV row as list of strings (Date, Category, Amount, Description, Kind).

    Returns:
        NewRecord object.

    Raises:
        ValueError: If the date, amount or kind cannot be parsed.
    """
    date = LedgerDate.parse(row[0])
    category = row[1].strip()
    amount = float(row[2].strip().replace(",", ""))
    description = row[3].strip()
    kind = Kind.parse(row[4])

    return NewRecord(
        date=date,
        category=category,
        amount=amount,
        description=description,
        kind=kind,
    )


def ingest(source: TextIO) -> List[NewRecord]:
    """
    Ingest ledger records from CSV.

    Expected format:
    - Header row (line 1): Date,Category,Amount,Description,Kind
    - Record rows (line 2+): date as d/m/yyyy, kind as Income or Expense
    """
    records = []
    reader = csv.reader(source)

    try:
        header = next(reader)
        if [h.strip() for h in header[: len(HEADER)]] != HEADER:
            logger.error(f"Invalid header format: {header}")
            return records
    except StopIteration:
        logger.error("Empty CSV file")
        return records

    line_num = 1
    for row in reader:
        line_num += 1

        if not row or len(row) < len(HEADER):
            logger.warning(f"Skipping malformed line {line_num}: {row}")
            continue

        try:
            records.append(row_to_record(row))
        except ValueError as e:
            logger.error(f"Error processing line {line_num}: {row} - {e}")
            continue

    logger.info(f"Successfully ingested {len(records)} records")
    return records
