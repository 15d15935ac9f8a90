#!/usr/bin/env python3
"""
Project a decoded FlowCouncil event feed into the entity store.

Usage:
    python index_events.py events.ndjson             # Index a feed
    python index_events.py events.ndjson --strict    # Reject duplicates, atomic ballots
    python index_events.py --validate                # Check data integrity
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

import polars as pl

from app.repositories.db import db_exists, get_read_connection
from etl import index_feed
from etl.validation import validate_all
from settings import DB_PATH, STRICT_MODE
from settings.logging import setup_logging

logger = setup_logging(to_file=True)


def run_validation() -> bool:
    """Validate every council in the database."""
    if not db_exists(DB_PATH):
        print("\n⚠️  No indexed data found. Run 'python index_events.py FEED' first.\n")
        return True

    conn = get_read_connection(DB_PATH)
    report = validate_all(conn)
    conn.close()

    print("\n" + "=" * 60)
    print("DATA VALIDATION REPORT")
    print("=" * 60)

    if report.is_empty():
        print("\nNo councils indexed.")

    for row in report.iter_rows(named=True):
        status = "✅" if row["valid"] else "❌"
        print(f"\nCouncil {row['council']} {status}")
        print(f"  Voters: {row['voters']:,} (votersCount {row['voters_count']:,})")
        print(f"  Ballots: {row['ballots']:,}")
        if row["issues"]:
            print(f"  ⚠️  {row['issues']}")

    invalid = report.filter(~pl.col("valid")).height
    print("\n" + "=" * 60)
    if invalid == 0:
        print("✅ All data valid!")
    else:
        print(f"❌ {invalid} council(s) with issues.")
    print("=" * 60 + "\n")

    return invalid == 0


def main():
    args = sys.argv[1:]

    if "--validate" in args or args == ["validate"]:
        sys.exit(0 if run_validation() else 1)

    strict = "--strict" in args or STRICT_MODE
    feeds = [a for a in args if not a.startswith("--")]

    if len(feeds) != 1:
        print(__doc__)
        sys.exit(1)

    feed = Path(feeds[0])
    if not feed.exists():
        logger.error("Feed not found: {}", feed)
        sys.exit(1)

    logger.info("Mode: {}", "STRICT" if strict else "COMPATIBLE")
    stats = index_feed(feed, DB_PATH, strict)

    logger.info("Running validation...")
    run_validation()

    if stats["failed"]:
        logger.warning("{} events failed", stats["failed"])


if __name__ == "__main__":
    main()
