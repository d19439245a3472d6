#!/usr/bin/env python3

import sys
import shlex
import argparse
from cli import records
from logger import get_logger

logger = get_logger()

PROMPT = "ledger> "


def build_parser() -> argparse.ArgumentParser:
    """Build the parser for one shell line."""
    parser = argparse.ArgumentParser(
        prog="",
        description="Commands: add, delete, undo, list, category, date-range, "
        "amount-range, search, top, monthly, summary, stats, help, quit",
        add_help=False,
    )
    subparsers = parser.add_subparsers(dest="subcommand", required=True)
    records.add_mutation_parsers(subparsers)
    records.add_query_parsers(subparsers)
    return parser


def run_shell(services, input_func=None) -> None:
    """Read and run commands until quit, exit or end of input.

    Args:
        services: Services container holding the ledger for this session.
        input_func: Line reader, replaceable for testing.
    """
    parser = build_parser()
    input_func = input_func or input
    logger.info("Type 'help' for commands, 'quit' to leave.")

    while True:
        try:
            line = input_func(PROMPT)
        except EOFError:
            break

        line = line.strip()
        if not line:
            continue
        if line in ("quit", "exit"):
            break
        if line == "help":
            logger.info(parser.format_help())
            continue

        try:
            argv = shlex.split(line)
        except ValueError as e:
            logger.error(f"Could not parse command: {e}")
            continue

        # argparse exits on bad input; in the shell that only ends this line
        try:
            args = parser.parse_args(argv)
        except SystemExit:
            continue

        try:
            args.func(args, services)
        except SystemExit:
            continue
        except Exception as e:
            logger.error(f"Error: {e}")

    logger.info("Goodbye.")


def cmd_shell(args, services):
    """Start an interactive session over one in-memory ledger.

    Args:
        args: Parsed command-line arguments with optional file
        services: Services container with an empty records store
    """
    seed_path = records.resolve_seed_path(
        args, services.config, fallback_to_sample=False
    )
    if seed_path is not None:
        try:
            count = records.load_seed(services, seed_path)
        except (FileNotFoundError, ValueError) as e:
            logger.error(str(e))
            sys.exit(1)
        logger.info(f"Loaded {count} records from {seed_path}")

    run_shell(services)


def setup_parser(subparsers):
    """Setup shell subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "shell",
        help="Interactive ledger session",
        description="Add, delete, undo and query records in one session. "
        "Nothing is saved when the session ends.",
    )
    parser.add_argument(
        "--file",
        help="CSV or YAML seed file to start from (defaults to the configured seed file)",
    )
    parser.set_defaults(func=cmd_shell)
