"""
Command-line interface for SENSORIO.

This module provides a CLI for basic sensor database operations.
"""

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..config.settings import get_settings
from ..core.errors import DatasetExportError
from ..core.models import MODE_FIELDS
from ..core.mutations import TreeEditor
from ..core.repository import SensorRepository
from ..core.session import EditingSession
from ..infrastructure.logging_config import setup_logging, get_logger


logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="sensorio",
        description="Camera sensor database editor"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"SENSORIO {__version__}"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Info command
    info_parser = subparsers.add_parser("info", help="Display database summary")
    info_parser.add_argument("database", type=Path, help="Path to sensor CSV file")

    # Fetch-default command
    fetch_parser = subparsers.add_parser("fetch-default", help="Download the default database")
    fetch_parser.add_argument("output", type=Path, help="Output file or directory")

    # Normalize command
    normalize_parser = subparsers.add_parser(
        "normalize", help="Sort and/or sync every model, then write the database"
    )
    normalize_parser.add_argument("database", type=Path, help="Path to sensor CSV file")
    normalize_parser.add_argument("-o", "--output", type=Path,
                                  help="Output file or directory (defaults to overwriting the input)")
    normalize_parser.add_argument("--sort-by-area", action="store_true",
                                  help="Sort each model's modes by sensor area, largest first")
    normalize_parser.add_argument("--sync", nargs="+", default=[], metavar="FIELD",
                                  choices=sorted(MODE_FIELDS),
                                  help="Copy these fields from each model's first mode to all its modes")

    return parser


def cmd_info(args: argparse.Namespace) -> int:
    """
    Display a summary of a sensor database.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success).
    """
    session = EditingSession()
    repository = SensorRepository(session)

    if not repository.load_file(args.database):
        return 1

    tree = session.tree
    print(f"Database: {args.database}")
    print(f"Brands: {len(tree.brands)}")
    print(f"Models: {tree.model_count()}")
    print(f"Modes: {tree.mode_count()}")
    for brand in tree.brands:
        print(f"  {brand.brand}")
        for model in brand.models:
            print(f"    {model.name} ({len(model.modes)} modes)")

    return 0


def cmd_fetch_default(args: argparse.Namespace) -> int:
    """
    Download the default database, validate it and write it out.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success).
    """
    session = EditingSession(file_name=get_settings().default_file_name)
    repository = SensorRepository(session)

    if not repository.load_default():
        return 1

    try:
        target = repository.export(args.output)
    except DatasetExportError as e:
        logger.error(str(e))
        return 1

    print(f"Wrote {session.tree.mode_count()} modes to {target}")
    return 0


def cmd_normalize(args: argparse.Namespace) -> int:
    """
    Apply bulk edits to every model of a database and write it back.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Exit code (0 for success).
    """
    session = EditingSession()
    repository = SensorRepository(session)
    editor = TreeEditor(session)

    if not repository.load_file(args.database):
        return 1

    for brand_idx, brand in enumerate(session.tree.brands):
        for model_idx in range(len(brand.models)):
            if args.sort_by_area:
                editor.sort_modes_by_area(brand_idx, model_idx)
            for field in args.sync:
                editor.sync_field(brand_idx, model_idx, field)

    output = args.output if args.output is not None else args.database
    try:
        target = repository.export(output)
    except DatasetExportError as e:
        logger.error(str(e))
        return 1

    print(f"Wrote {session.tree.mode_count()} modes to {target}")
    return 0


def main(argv=None):
    """
    Main entry point for the CLI.

    Returns:
        Exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    log_level = logging.DEBUG if args.verbose else settings.log_level
    setup_logging(level=log_level, log_file=settings.log_file_path, log_to_file=settings.log_to_file)

    if args.command == "info":
        return cmd_info(args)
    elif args.command == "fetch-default":
        return cmd_fetch_default(args)
    elif args.command == "normalize":
        return cmd_normalize(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
