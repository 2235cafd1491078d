#!/usr/bin/env python
"""Seed the catalog database with sample data.

This script:
1. Creates the tables if they are missing
2. Adds sample categories when none exist
3. Tops the product list up to 30 rows for trying out pagination

Usage:
    # Seed the database configured by DB_URL / DB_* settings
    python scripts/seed_test_data.py

    # Reproducible category assignment
    python scripts/seed_test_data.py --seed 42

    # Only create tables
    python scripts/seed_test_data.py --tables-only
"""

import argparse
import asyncio
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog_admin.infra.database import close_db_engine, create_tables, get_db_session
from catalog_admin.infra.logging import get_logger, setup_logging
from catalog_admin.services import create_test_data


setup_logging()
logger = get_logger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed catalog sample data")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for category assignment",
    )
    parser.add_argument(
        "--tables-only",
        action="store_true",
        help="Create tables and exit without adding rows",
    )
    return parser.parse_args()


async def main() -> int:
    """Main entry point."""
    args = parse_args()
    logger.info("Seeding catalog", seed=args.seed, tables_only=args.tables_only)

    try:
        await create_tables()
        if args.tables_only:
            print("Tables created")
            return 0

        async with get_db_session() as session:
            result = await create_test_data(session, rng=random.Random(args.seed))
    finally:
        await close_db_engine()

    if result.success:
        print(result.message)
        return 0

    print(f"Failed to create test data: {result.error}")
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
