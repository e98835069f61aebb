#!/usr/bin/env python
"""
Database initialization script.

This script performs a complete database setup:
1. Creates database schema (tables, indexes, constraints)
2. Loads the initial characters, movies and franchises
3. Verifies the schema and prints table counts

Usage:
    # Create tables and seed an empty database
    python scripts/init_database.py

    # Drop everything and start over
    python scripts/init_database.py --reset

    # Schema only
    python scripts/init_database.py --no-seed

    # Another database
    python scripts/init_database.py --database-url sqlite:///data/other.db
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from movie_characters.api.config import get_database_url
from movie_characters.database import DatabaseManager, init_database, verify_schema, crud
from movie_characters.services import FranchiseService, MovieService
from movie_characters.utils.logging_config import configure_script_logging, get_logger

logger = get_logger(__name__)


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def print_counts(db_manager):
    """Print the number of rows per entity."""
    with db_manager.session_scope() as session:
        print(f"  Characters: {crud.get_character_count(session):,}")
        print(f"  Movies:     {MovieService(session).get_movie_count():,}")
        print(f"  Franchises: {FranchiseService(session).get_franchise_count():,}")


def main():
    parser = argparse.ArgumentParser(description="Initialize the movie characters database")
    parser.add_argument("--database-url", default=None,
                        help="SQLAlchemy URL (default: DATABASE_URL or data/movie_characters.db)")
    parser.add_argument("--reset", action="store_true",
                        help="Drop all tables before creating them")
    parser.add_argument("--no-seed", action="store_true",
                        help="Create the schema without loading initial data")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    configure_script_logging(debug=args.debug)

    database_url = args.database_url or get_database_url()
    db_manager = DatabaseManager(database_url)

    print_section("Initializing Database")
    print(f"  URL: {database_url}")
    init_database(db_manager, reset=args.reset, seed=not args.no_seed)

    print_section("Verifying Schema")
    if not verify_schema(db_manager):
        logger.error("Database initialization failed")
        db_manager.close()
        return 1
    print_counts(db_manager)

    db_manager.close()
    print("\n[OK] Database initialization successful")
    return 0


if __name__ == "__main__":
    sys.exit(main())
