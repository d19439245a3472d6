#!/usr/bin/env python3

import sys
from pathlib import Path
from typing import List, Optional

from config import get_sample_path
from ingestion import get_module_for_path
from models.ledger_date import LedgerDate
from models.record import Kind, Record
from services.undo import UndoAction
from logger import get_logger

logger = get_logger()


def load_seed(services, path: Path) -> int:
    """Load a seed file into the services' record store.

    Args:
        services: Services container with the records store.
        path: CSV or YAML seed file.

    Returns:
        Number of records added.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file type is not supported.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Seed file not found: {path}")

    ingestion_module = get_module_for_path(path)
    with open(path, "r", encoding="utf-8-sig") as f:
        new_records = ingestion_module.ingest(f)

    ids = services.records.bulk_add(new_records)
    logger.debug(f"Loaded {len(ids)} records from {path}")
    return len(ids)


def resolve_seed_path(args, config, fallback_to_sample: bool = True) -> Optional[Path]:
    """Pick the seed file: --file, then the configured seed file, then the sample."""
    if getattr(args, "file", None):
        return Path(args.file)
    if config.seed_file is not None:
        return config.seed_file
    if fallback_to_sample:
        return get_sample_path()
    return None


def format_amount(config, amount: float) -> str:
    return f"{config.currency_symbol}{amount:.2f}"


def _log_records(config, title: str, records: List[Record], empty_message: str):
    logger.info(f"\n{title}")
    logger.info("=" * 80)
    if not records:
        logger.info(empty_message)
        return

    logger.info(
        f"{'ID':<5}{'Date':<12}{'Category':<15}{'Amount':<14}{'Description':<22}Kind"
    )
    logger.info("-" * 80)
    for r in records:
        logger.info(
            f"{r.id:<5}{str(r.date):<12}{r.category:<15}"
            f"{format_amount(config, r.amount):<14}{r.description:<22}{r.kind.value}"
        )
    logger.info(f"\nTotal records: {len(records)}")


def cmd_list(args, services):
    """List all records in insertion order."""
    _log_records(
        services.config, "All Records:", services.queries.all(), "No records found."
    )


def cmd_category(args, services):
    """List the records of one category."""
    _log_records(
        services.config,
        f"Records in category: {args.category}",
        services.queries.by_category(args.category),
        f"No records in category: {args.category}",
    )


def cmd_date_range(args, services):
    """List records dated between two dates, inclusive."""
    _log_records(
        services.config,
        f"Records from {args.start} to {args.end}:",
        services.queries.by_date_range(args.start, args.end),
        "No records found in this date range.",
    )


def cmd_amount_range(args, services):
    """List records with an amount between two bounds, inclusive."""
    config = services.config
    _log_records(
        config,
        f"Records between {format_amount(config, args.minimum)} "
        f"and {format_amount(config, args.maximum)}:",
        services.queries.by_amount_range(args.minimum, args.maximum),
        "No records found in this amount range.",
    )


def cmd_search(args, services):
    """List records whose description contains a keyword (case-sensitive)."""
    _log_records(
        services.config,
        f'Search results for: "{args.keyword}"',
        services.queries.by_keyword(args.keyword),
        f"No records found with keyword: {args.keyword}",
    )


def cmd_top(args, services):
    """Show the largest expenses."""
    config = services.config
    n = args.n if args.n is not None else config.top_expenses
    expenses = services.queries.top_expenses(n)

    if not expenses:
        logger.info("No expenses found.")
        return

    logger.info(f"\nTop {len(expenses)} Expenses:")
    logger.info("=" * 80)
    logger.info(f"{'Rank':<6}{'Category':<15}{'Amount':<14}Description")
    logger.info("-" * 80)
    for rank, r in enumerate(expenses, start=1):
        logger.info(
            f"{rank:<6}{r.category:<15}{format_amount(config, r.amount):<14}{r.description}"
        )


def cmd_monthly(args, services):
    """Show the total for one month, optionally for one kind only."""
    total = services.queries.monthly_total(args.month, args.year, args.kind)
    label = f"{args.kind.value} total" if args.kind else "Total"
    logger.info(
        f"{label} for {args.month:02d}/{args.year}: "
        f"{format_amount(services.config, total)}"
    )


def cmd_summary(args, services):
    """Show expense totals per category."""
    summary = services.queries.category_summary()

    logger.info("\nCategory Summary (expenses):")
    logger.info("=" * 80)
    if not summary:
        logger.info("No categories found.")
        return
    for category, total in summary.items():
        logger.info(f"{category:<20}{format_amount(services.config, total)}")


def cmd_stats(args, services):
    """Show aggregate statistics."""
    config = services.config
    stats = services.queries.statistics()

    logger.info("\nStatistics:")
    logger.info("=" * 80)
    logger.info(f"Total records: {stats.count}")
    logger.info(f"Total income: {format_amount(config, stats.total_income)}")
    logger.info(f"Total expenses: {format_amount(config, stats.total_expenses)}")
    logger.info(f"Net balance: {format_amount(config, stats.net_balance)}")
    logger.info(f"Categories: {stats.category_count}")


def cmd_add(args, services):
    """Add a record."""
    record_id = services.records.add(
        args.date, args.category, args.amount, args.description, args.kind
    )
    logger.info(f"✓ Record added (ID: {record_id})")


def cmd_delete(args, services):
    """Delete a record by id."""
    if services.records.delete(args.record_id):
        logger.info(f"✓ Record (ID: {args.record_id}) deleted.")
    else:
        logger.error(f"Record with ID {args.record_id} not found.")


def cmd_undo(args, services):
    """Undo the most recent add or delete."""
    entry = services.records.undo()
    if entry is None:
        logger.error("No operation to undo.")
        return

    if entry.action is UndoAction.ADD:
        logger.info(f"✓ Undo performed: added record {entry.record.id} removed.")
    else:
        logger.info(f"✓ Undo performed: deleted record {entry.record.id} restored.")


def add_query_parsers(subparsers):
    """Register the read-only record commands.

    Args:
        subparsers: Subparsers object to add the commands to.
    """
    list_parser = subparsers.add_parser("list", help="List all records")
    list_parser.set_defaults(func=cmd_list)

    category_parser = subparsers.add_parser(
        "category", help="List records in a category"
    )
    category_parser.add_argument("category", help="Category name (exact match)")
    category_parser.set_defaults(func=cmd_category)

    date_range_parser = subparsers.add_parser(
        "date-range",
        help="List records between two dates (inclusive)",
        epilog="Example: date-range 5/11/2025 12/11/2025",
    )
    date_range_parser.add_argument("start", type=LedgerDate.parse, help="Start date d/m/yyyy")
    date_range_parser.add_argument("end", type=LedgerDate.parse, help="End date d/m/yyyy")
    date_range_parser.set_defaults(func=cmd_date_range)

    amount_range_parser = subparsers.add_parser(
        "amount-range", help="List records between two amounts (inclusive)"
    )
    amount_range_parser.add_argument("minimum", type=float, help="Minimum amount")
    amount_range_parser.add_argument("maximum", type=float, help="Maximum amount")
    amount_range_parser.set_defaults(func=cmd_amount_range)

    search_parser = subparsers.add_parser(
        "search", help="Search descriptions for a keyword (case-sensitive)"
    )
    search_parser.add_argument("keyword", help="Substring to look for")
    search_parser.set_defaults(func=cmd_search)

    top_parser = subparsers.add_parser("top", help="Show the largest expenses")
    top_parser.add_argument(
        "-n",
        type=int,
        default=None,
        help="Number of expenses to show (defaults to the configured top_expenses)",
    )
    top_parser.set_defaults(func=cmd_top)

    monthly_parser = subparsers.add_parser("monthly", help="Show a month's total")
    monthly_parser.add_argument("month", type=int, help="Month (1-12)")
    monthly_parser.add_argument("year", type=int, help="Year (e.g., 2025)")
    monthly_parser.add_argument(
        "--kind",
        type=Kind.parse,
        default=None,
        help="Only count Income or Expense records",
    )
    monthly_parser.set_defaults(func=cmd_monthly)

    summary_parser = subparsers.add_parser(
        "summary", help="Show expense totals per category"
    )
    summary_parser.set_defaults(func=cmd_summary)

    stats_parser = subparsers.add_parser("stats", help="Show aggregate statistics")
    stats_parser.set_defaults(func=cmd_stats)


def add_mutation_parsers(subparsers):
    """Register the commands that change the ledger (used by the shell).

    Args:
        subparsers: Subparsers object to add the commands to.
    """
    add_parser = subparsers.add_parser(
        "add",
        help="Add a record",
        epilog='Example: add 1/11/2025 Food 250.50 "Lunch at Cafe" Expense',
    )
    add_parser.add_argument("date", type=LedgerDate.parse, help="Date d/m/yyyy")
    add_parser.add_argument("category", help="Category name")
    add_parser.add_argument("amount", type=float, help="Amount")
    add_parser.add_argument("description", help="Description")
    add_parser.add_argument("kind", type=Kind.parse, help="Income or Expense")
    add_parser.set_defaults(func=cmd_add)

    delete_parser = subparsers.add_parser("delete", help="Delete a record by ID")
    delete_parser.add_argument("record_id", type=int, help="Record ID")
    delete_parser.set_defaults(func=cmd_delete)

    undo_parser = subparsers.add_parser(
        "undo", help="Undo the most recent add or delete"
    )
    undo_parser.set_defaults(func=cmd_undo)


def setup_parser(subparsers):
    """Setup records subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "records",
        help="Query records from a seed file",
        description="Load a seed file into a fresh ledger and run one query",
        epilog="""
Examples:
  python -m cli records list
  python -m cli records --file ledger.csv top -n 3
  python -m cli records monthly 11 2025 --kind Expense
        """,
    )
    parser.add_argument(
        "--file",
        help="CSV or YAML seed file (defaults to the configured seed file, then the bundled sample)",
    )

    records_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available record commands",
        dest="subcommand",
        required=True,
    )
    add_query_parsers(records_subparsers)


def prepare(args, services):
    """Load the seed file for a records command, exiting on failure."""
    seed_path = resolve_seed_path(args, services.config)
    try:
        count = load_seed(services, seed_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)
    logger.debug(f"Ledger ready with {count} records")
