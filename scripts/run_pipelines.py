#!/usr/bin/env python3
"""
Pipeline Runner Script

Seeds the database from the JSON fixture tree, one stage at a time.

Usage:
    python scripts/run_pipelines.py                         # Run all stages
    python scripts/run_pipelines.py --stage scorecards      # Run one stage
    python scripts/run_pipelines.py --list                  # Show stages
    python scripts/run_pipelines.py --data-dir ./fixtures   # Other fixture tree

Stages whose tables already contain rows are skipped, so re-running after a
completed import changes nothing.
"""

import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import asyncio
import argparse
from datetime import datetime

import pytz

from core.logging import setup_logging
from core.settings import settings
from db.base import init_db, close_db
from pipelines import PIPELINE_REGISTRY, list_pipelines, run_all_pipelines, run_pipeline
from schemas.common import ApiStatus
from schemas.pipeline import PipelineResult


def print_result(name: str, result: PipelineResult) -> None:
    """Print pipeline result in a readable format."""
    if result.skipped:
        status_icon = "-"
    elif result.status == ApiStatus.SUCCESS:
        status_icon = "✓"
    else:
        status_icon = "✗"
    print(f"\n{status_icon} {name}")
    print(f"  Status: {result.status}")
    print(f"  Message: {result.message}")
    if result.records_processed is not None:
        print(f"  Records: {result.records_processed}")
    if result.duration_seconds is not None:
        print(f"  Duration: {result.duration_seconds:.2f}s")
    if result.error:
        print(f"  Error: {result.error[:200]}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Import the IPL fixture tree into the stats database"
    )
    parser.add_argument(
        "--stage",
        choices=list(PIPELINE_REGISTRY.keys()),
        help="Run only this stage",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List the stages in run order and exit",
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help=f"Fixture directory (default: {settings.fixtures_dir})",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Database URL (default: DATABASE_URL setting)",
    )
    return parser


async def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.list:
        for i, info in enumerate(list_pipelines(), 1):
            print(f"{i:>2}. {info['name']:<22} {info['description']}")
        return 0

    setup_logging(
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
        service_name=settings.service_name,
    )

    # Initialize database connection
    print("Initializing database connection...")
    init_db(args.database_url)

    tz = pytz.timezone(settings.timezone)
    start_time = datetime.now(tz)
    print(f"Import started at {start_time.isoformat()}")

    try:
        if args.stage:
            print("\n" + "=" * 50)
            print(f"Running: {args.stage}")
            print("=" * 50)
            results = {args.stage: await run_pipeline(args.stage, args.data_dir)}
        else:
            results = await run_all_pipelines(args.data_dir)

        print("\n" + "=" * 50)
        print("RESULTS SUMMARY")
        print("=" * 50)

        for name, result in results.items():
            print_result(name.replace("_", " ").title(), result)

        failures = [
            name
            for name, result in results.items()
            if result.status != ApiStatus.SUCCESS
        ]
        if failures:
            print(f"\n⚠ Import stopped at: {', '.join(failures)}")
            return 1

    finally:
        # Close database connection
        close_db()

    duration = (datetime.now(tz) - start_time).total_seconds()
    print(f"\nTotal duration: {duration:.2f}s")
    print("Import completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
