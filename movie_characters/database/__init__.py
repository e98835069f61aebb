"""
Database module for the movie characters API.

This module provides database models, connection management, initial data
and character CRUD operations using SQLAlchemy ORM.
"""

from movie_characters.database.models import Base, Character, Movie, Franchise, character_movie
from movie_characters.database.connection import DatabaseManager, get_database_url
from movie_characters.database.init_db import init_database, verify_schema
from movie_characters.database.seed import seed_database
from movie_characters.database import crud

__all__ = [
    # Models
    'Base',
    'Character',
    'Movie',
    'Franchise',
    'character_movie',
    # Connection
    'DatabaseManager',
    'get_database_url',
    # Initialization
    'init_database',
    'verify_schema',
    'seed_database',
    # CRUD module
    'crud',
]
