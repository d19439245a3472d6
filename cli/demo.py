#!/usr/bin/env python3

from argparse import Namespace

from config import get_sample_path
from cli import records
from models.ledger_date import LedgerDate
from models.record import Kind
from logger import get_logger

logger = get_logger()


def cmd_demo(args, services):
    """Walk through the ledger features using the bundled sample data.

    Args:
        args: Parsed command-line arguments
        services: Services container with an empty records store
    """
    logger.info("=" * 80)
    logger.info("Pocket Ledger demo")
    logger.info("=" * 80)

    logger.info("\n--- Adding records ---")
    count = records.load_seed(services, get_sample_path())
    logger.info(f"✓ Added {count} records")

    records.cmd_list(Namespace(), services)
    records.cmd_stats(Namespace(), services)
    records.cmd_category(Namespace(category="Food"), services)
    records.cmd_summary(Namespace(), services)
    records.cmd_top(Namespace(n=3), services)
    records.cmd_date_range(
        Namespace(start=LedgerDate(5, 11, 2025), end=LedgerDate(12, 11, 2025)),
        services,
    )
    records.cmd_amount_range(Namespace(minimum=100.0, maximum=700.0), services)
    records.cmd_search(Namespace(keyword="Food"), services)
    records.cmd_monthly(Namespace(month=11, year=2025, kind=Kind.EXPENSE), services)

    logger.info("\n--- Undo ---")
    records.cmd_undo(Namespace(), services)
    records.cmd_list(Namespace(), services)

    logger.info("\nDemo complete!")


def setup_parser(subparsers):
    """Setup demo subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "demo",
        help="Run a scripted demo on the bundled sample data",
        description="Load the sample November 2025 ledger and run every query once",
    )
    parser.set_defaults(func=cmd_demo)
