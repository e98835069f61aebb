"""
Movie service: domain operations for movies and their characters.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.orm import Session, selectinload

from movie_characters.database.models import Character, Franchise, Movie, character_movie, id_in_range
from movie_characters.services.exceptions import EntityNotFoundError, InvalidReferenceError

logger = logging.getLogger(__name__)


class MovieService:
    """
    Repository-style access to movies.

    Every mutating method commits its own transaction; association updates
    either apply completely or not at all.
    """

    def __init__(self, session: Session):
        """
        Args:
            session: Database session owned by the caller (one per request)
        """
        self.session = session

    # ==================== READS ====================

    def get_all_movies(self) -> List[Movie]:
        """Get all movies with their characters, ordered by id."""
        return list(self.session.scalars(
            select(Movie)
            .options(selectinload(Movie.characters))
            .order_by(Movie.id)
        ))

    def get_movie(self, movie_id: int) -> Optional[Movie]:
        """
        Get a movie by ID.

        Args:
            movie_id: Movie ID

        Returns:
            Movie object with characters loaded, or None if not found
        """
        if not id_in_range(movie_id):
            return None
        return self.session.scalars(
            select(Movie)
            .options(selectinload(Movie.characters))
            .where(Movie.id == movie_id)
        ).first()

    def movie_exists(self, movie_id: int) -> bool:
        """Check whether a movie with the given id exists."""
        if not id_in_range(movie_id):
            return False
        return self.session.scalar(
            select(Movie.id).where(Movie.id == movie_id)
        ) is not None

    def get_movie_count(self) -> int:
        """Get total count of movies."""
        return self.session.scalar(select(func.count(Movie.id)))

    def get_movie_characters(self, movie_id: int) -> List[Character]:
        """
        Get the characters appearing in a movie.

        Args:
            movie_id: Movie ID

        Returns:
            List of Character objects ordered by id

        Raises:
            EntityNotFoundError: If the movie does not exist
        """
        if not self.movie_exists(movie_id):
            raise EntityNotFoundError("Movie", movie_id)

        return list(self.session.scalars(
            select(Character)
            .join(character_movie, character_movie.c.character_id == Character.id)
            .where(character_movie.c.movie_id == movie_id)
            .options(selectinload(Character.movies))
            .order_by(Character.id)
        ))

    # ==================== WRITES ====================

    def add_movie(self, fields: Dict[str, Any]) -> Movie:
        """
        Create a movie.

        Args:
            fields: Column values, see movie_characters.api.mappers.movie_fields

        Returns:
            The persisted Movie with its server-assigned id

        Raises:
            InvalidReferenceError: If franchise_id names a missing franchise
        """
        self._check_franchise(fields.get("franchise_id"))

        movie = Movie(**fields)
        self.session.add(movie)
        self.session.commit()
        self.session.refresh(movie)
        logger.info("Created movie %s (%s)", movie.id, movie.title)
        return movie

    def update_movie(self, movie_id: int, fields: Dict[str, Any]) -> Optional[Movie]:
        """
        Replace the scalar fields of a movie.

        Args:
            movie_id: Movie ID
            fields: Every client-settable column value

        Returns:
            Updated Movie object or None if not found

        Raises:
            InvalidReferenceError: If franchise_id names a missing franchise
        """
        if not self.movie_exists(movie_id):
            return None
        self._check_franchise(fields.get("franchise_id"))

        result = self.session.execute(
            update(Movie).where(Movie.id == movie_id).values(**fields)
        )
        if result.rowcount == 0:
            # Row deleted between the existence check and the update
            self.session.rollback()
            return None
        self.session.commit()
        logger.info("Updated movie %s", movie_id)
        return self.get_movie(movie_id)

    def delete_movie(self, movie_id: int) -> bool:
        """
        Delete a movie. Its CharacterMovie rows go with it; characters stay.

        Returns:
            True if the movie was deleted, False if not found
        """
        if not id_in_range(movie_id):
            return False
        movie = self.session.get(Movie, movie_id)
        if movie is None:
            return False
        self.session.delete(movie)
        self.session.commit()
        logger.info("Deleted movie %s", movie_id)
        return True

    def update_movie_characters(self, movie_id: int, character_ids: Iterable[int]) -> None:
        """
        Replace the set of characters appearing in a movie.

        The movie ends up linked to exactly the given characters. Repeated
        ids collapse, and an empty list clears the cast.

        Args:
            movie_id: Movie ID
            character_ids: Ids of the characters to link

        Raises:
            EntityNotFoundError: If the movie does not exist
            InvalidReferenceError: If any character id does not exist; no
                link is changed in that case
        """
        if not self.movie_exists(movie_id):
            raise EntityNotFoundError("Movie", movie_id)

        wanted = set(character_ids)
        storable = {cid for cid in wanted if id_in_range(cid)}
        found = set(self.session.scalars(
            select(Character.id).where(Character.id.in_(storable))
        )) if storable else set()
        missing = wanted - found
        if missing:
            logger.warning("Movie %s: unknown character ids %s", movie_id, sorted(missing))
            raise InvalidReferenceError("Character", missing)

        try:
            self.session.execute(
                delete(character_movie).where(character_movie.c.movie_id == movie_id)
            )
            if wanted:
                self.session.execute(
                    insert(character_movie),
                    [{"character_id": cid, "movie_id": movie_id} for cid in sorted(wanted)],
                )
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        # Loaded collections no longer match the join table
        self.session.expire_all()
        logger.info("Movie %s characters set to %s", movie_id, sorted(wanted))

    def _check_franchise(self, franchise_id: Optional[int]) -> None:
        if franchise_id is None:
            return
        if not id_in_range(franchise_id) or self.session.get(Franchise, franchise_id) is None:
            raise InvalidReferenceError("Franchise", [franchise_id])
