"""
Initial data for a fresh database: a handful of characters, movies and
franchises, plus the character/movie links between them.
"""

import logging
from sqlalchemy import insert, select
from sqlalchemy.orm import Session

from movie_characters.database.models import Character, Franchise, Movie, character_movie

logger = logging.getLogger(__name__)


CHARACTERS = [
    {"id": 1, "name": "Thor", "alias": "Lord of Thunder", "gender": "Male", "image_url": None},
    {"id": 2, "name": "Ironman", "alias": "Tony Stark", "gender": "Male", "image_url": None},
    {"id": 3, "name": "Black Widow", "alias": "Natasha Romanoff", "gender": "Female", "image_url": None},
    {"id": 4, "name": "Spiderman", "alias": "Peter Parker", "gender": "Male", "image_url": None},
    {"id": 5, "name": "Batman", "alias": "Bruce Wayne", "gender": "Male", "image_url": None},
]

FRANCHISES = [
    {"id": 1, "name": "MCU", "description": "Marvel's cinematic universe."},
    {"id": 2, "name": "DNT", "description": "Dark Knight Trilogy"},
    {"id": 3, "name": "TCU", "description": "Titanic's cinematic universe."},
]

MOVIES = [
    {"id": 1, "title": "The Avengers", "genre": "Action", "year": 2012,
     "director": "Joss Whedon", "franchise_id": 1},
    {"id": 2, "title": "Avengers: Endgame", "genre": "Action", "year": 2019,
     "director": "Anthony Russo, Joe Russo", "franchise_id": 1},
    {"id": 3, "title": "The Dark Knight", "genre": "Action", "year": 2008,
     "director": "Christopher Nolan", "franchise_id": None},
    {"id": 4, "title": "Titanic", "genre": "Action", "year": 1997,
     "director": "James Camera", "franchise_id": None},
]

# (character_id, movie_id)
CHARACTER_MOVIES = [
    (1, 1), (2, 1), (3, 1),
    (1, 2), (2, 2), (3, 2), (4, 2),
    (5, 3),
]


def seed_database(session: Session) -> bool:
    """
    Insert the initial data unless the database already holds characters.

    Args:
        session: Database session

    Returns:
        True if data was inserted, False if the database was left untouched
    """
    if session.scalar(select(Character.id).limit(1)) is not None:
        logger.info("Database already populated, skipping seed")
        return False

    session.execute(insert(Franchise), FRANCHISES)
    session.execute(insert(Character), CHARACTERS)
    session.execute(insert(Movie), MOVIES)
    session.execute(
        insert(character_movie),
        [{"character_id": c, "movie_id": m} for c, m in CHARACTER_MOVIES],
    )
    session.commit()
    logger.info(
        "Seeded %d characters, %d movies, %d franchises",
        len(CHARACTERS), len(MOVIES), len(FRANCHISES),
    )
    return True
