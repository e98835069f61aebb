"""
Database initialization and schema creation.

This module provides functions to initialize the database schema and
populate it with initial data.
"""

import logging
from sqlalchemy import inspect

from movie_characters.database.connection import DatabaseManager
from movie_characters.database.seed import seed_database

logger = logging.getLogger(__name__)

EXPECTED_TABLES = {'characters', 'movies', 'franchises', 'CharacterMovie'}


def init_database(db_manager: DatabaseManager, reset: bool = False, seed: bool = True) -> DatabaseManager:
    """
    Initialize the database and create all tables.

    Args:
        db_manager: DatabaseManager instance
        reset: If True, drop existing tables before creating new ones
        seed: If True, insert the initial data into an empty database

    Returns:
        The same DatabaseManager instance
    """
    if reset:
        db_manager.reset_database()
    else:
        db_manager.create_tables()
    logger.info("Database tables ready")

    if seed:
        with db_manager.session_scope() as session:
            seed_database(session)

    return db_manager


def verify_schema(db_manager: DatabaseManager) -> bool:
    """
    Verify that all tables exist in the database.

    Args:
        db_manager: DatabaseManager instance

    Returns:
        True if all tables exist, False otherwise
    """
    existing_tables = set(inspect(db_manager.engine).get_table_names())
    missing_tables = EXPECTED_TABLES - existing_tables

    if missing_tables:
        logger.error("Missing tables: %s", sorted(missing_tables))
        return False
    return True
