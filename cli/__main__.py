#!/usr/bin/env python3
"""
Pocket Ledger CLI - command-line interface for an in-memory income/expense ledger.

Usage:
    python -m cli <command> [options]

Commands:
    demo     Run a scripted demo on the bundled sample data
    records  Load a seed file and run one query
    shell    Interactive session (add, delete, undo, queries)

Examples:
    python -m cli demo
    python -m cli records list
    python -m cli records --file ledger.csv date-range 5/11/2025 12/11/2025
    python -m cli records monthly 11 2025 --kind Expense
    python -m cli shell --file ledger.yaml
"""

import sys
import argparse
from cli import demo, records, shell
from config import load_config
from services.base import Services
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Pocket Ledger - Personal income and expense ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    demo.setup_parser(subparsers)
    records.setup_parser(subparsers)
    shell.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Each run owns exactly one ledger
            services = Services(config)

            if args.command == "records":
                records.prepare(args, services)
            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
