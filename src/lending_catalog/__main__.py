"""
Command-line entry point for the lending catalog.

Builds a catalog from the sample data, performs the sample loans and prints the
resulting reports.

Usage:
    lending-catalog [--no-loans] [--log-level LEVEL]
    python -m lending_catalog [--no-loans] [--log-level LEVEL]
"""

import argparse
import logging
import sys

from .catalog import Catalog
from .config import get_config
from .observability import initialize_observability
from .seed import run_sample_loans, seed_sample_data

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lending-catalog",
        description="Run the lending catalog sample scenario",
    )
    parser.add_argument(
        "--no-loans",
        action="store_true",
        help="Skip the sample loans and only print the reports",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the sample scenario."""
    args = build_parser().parse_args(argv)
    config = get_config()

    # stderr keeps stdout limited to the reports
    logging.basicConfig(
        level=args.log_level or config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    initialize_observability()

    catalog = Catalog(config)
    seed_sample_data(catalog)
    logger.info("Catalog %s initialized", config.catalog_name)

    if not args.no_loans:
        for result in run_sample_loans(catalog):
            print(result)

    print("\n--- Library Summary ---")
    print(catalog.get_library_summary())

    print("\n--- Borrowed Items ---")
    print(catalog.get_members_borrowed_items())
    return 0


if __name__ == "__main__":
    sys.exit(main())
