"""
Franchise service: domain operations for franchises and their movies.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional
from sqlalchemy import func, select, update
from sqlalchemy.orm import Session, selectinload

from movie_characters.database.models import Character, Franchise, Movie, character_movie, id_in_range
from movie_characters.services.exceptions import EntityNotFoundError, InvalidReferenceError

logger = logging.getLogger(__name__)


class FranchiseService:
    """Repository-style access to franchises."""

    def __init__(self, session: Session):
        self.session = session

    # ==================== READS ====================

    def get_all_franchises(self) -> List[Franchise]:
        """Get all franchises with their movies, ordered by id."""
        return list(self.session.scalars(
            select(Franchise)
            .options(selectinload(Franchise.movies))
            .order_by(Franchise.id)
        ))

    def get_franchise(self, franchise_id: int) -> Optional[Franchise]:
        """Get a franchise by ID with its movies, or None if not found."""
        if not id_in_range(franchise_id):
            return None
        return self.session.scalars(
            select(Franchise)
            .options(selectinload(Franchise.movies))
            .where(Franchise.id == franchise_id)
        ).first()

    def franchise_exists(self, franchise_id: int) -> bool:
        if not id_in_range(franchise_id):
            return False
        return self.session.scalar(
            select(Franchise.id).where(Franchise.id == franchise_id)
        ) is not None

    def get_franchise_count(self) -> int:
        return self.session.scalar(select(func.count(Franchise.id)))

    def get_franchise_movies(self, franchise_id: int) -> List[Movie]:
        """
        Get the movies belonging to a franchise.

        Raises:
            EntityNotFoundError: If the franchise does not exist
        """
        if not self.franchise_exists(franchise_id):
            raise EntityNotFoundError("Franchise", franchise_id)

        return list(self.session.scalars(
            select(Movie)
            .where(Movie.franchise_id == franchise_id)
            .options(selectinload(Movie.characters))
            .order_by(Movie.id)
        ))

    def get_franchise_characters(self, franchise_id: int) -> List[Character]:
        """
        Get every character appearing in at least one movie of a franchise.

        A character playing in several of the franchise's movies is listed
        once.

        Raises:
            EntityNotFoundError: If the franchise does not exist
        """
        if not self.franchise_exists(franchise_id):
            raise EntityNotFoundError("Franchise", franchise_id)

        return list(self.session.scalars(
            select(Character)
            .join(character_movie, character_movie.c.character_id == Character.id)
            .join(Movie, Movie.id == character_movie.c.movie_id)
            .where(Movie.franchise_id == franchise_id)
            .distinct()
            .options(selectinload(Character.movies))
            .order_by(Character.id)
        ))

    # ==================== WRITES ====================

    def add_franchise(self, fields: Dict[str, Any]) -> Franchise:
        """
        Create a franchise.

        Args:
            fields: Column values (name, description)

        Returns:
            The persisted Franchise with its server-assigned id
        """
        franchise = Franchise(**fields)
        self.session.add(franchise)
        self.session.commit()
        self.session.refresh(franchise)
        logger.info("Created franchise %s (%s)", franchise.id, franchise.name)
        return franchise

    def update_franchise(self, franchise_id: int, fields: Dict[str, Any]) -> Optional[Franchise]:
        """
        Replace the scalar fields of a franchise.

        Returns:
            Updated Franchise object or None if not found
        """
        if not self.franchise_exists(franchise_id):
            return None

        result = self.session.execute(
            update(Franchise).where(Franchise.id == franchise_id).values(**fields)
        )
        if result.rowcount == 0:
            # Row deleted between the existence check and the update
            self.session.rollback()
            return None
        self.session.commit()
        logger.info("Updated franchise %s", franchise_id)
        return self.get_franchise(franchise_id)

    def delete_franchise(self, franchise_id: int) -> bool:
        """
        Delete a franchise.

        Movies of the franchise are kept and lose their franchise reference.

        Returns:
            True if the franchise was deleted, False if not found
        """
        if not id_in_range(franchise_id):
            return False
        franchise = self.session.get(Franchise, franchise_id)
        if franchise is None:
            return False
        try:
            detached = self.session.execute(
                update(Movie)
                .where(Movie.franchise_id == franchise_id)
                .values(franchise_id=None)
                .execution_options(synchronize_session=False)
            ).rowcount
            self.session.delete(franchise)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.expire_all()
        logger.info("Deleted franchise %s (%s movies detached)", franchise_id, detached)
        return True

    def update_franchise_movies(self, franchise_id: int, movie_ids: Iterable[int]) -> None:
        """
        Replace the set of movies belonging to a franchise.

        Afterwards exactly the given movies reference the franchise; movies
        that previously belonged to it and are not listed lose their
        franchise reference. Listed movies are moved from whatever franchise
        they belonged to before.

        Args:
            franchise_id: Franchise ID
            movie_ids: Ids of the movies to attach

        Raises:
            EntityNotFoundError: If the franchise does not exist
            InvalidReferenceError: If any movie id does not exist; nothing is
                changed in that case
        """
        if not self.franchise_exists(franchise_id):
            raise EntityNotFoundError("Franchise", franchise_id)

        wanted = set(movie_ids)
        storable = {mid for mid in wanted if id_in_range(mid)}
        found = set(self.session.scalars(
            select(Movie.id).where(Movie.id.in_(storable))
        )) if storable else set()
        missing = wanted - found
        if missing:
            logger.warning("Franchise %s: unknown movie ids %s", franchise_id, sorted(missing))
            raise InvalidReferenceError("Movie", missing)

        try:
            self.session.execute(
                update(Movie)
                .where(Movie.franchise_id == franchise_id)
                .values(franchise_id=None)
                .execution_options(synchronize_session=False)
            )
            if wanted:
                self.session.execute(
                    update(Movie)
                    .where(Movie.id.in_(wanted))
                    .values(franchise_id=franchise_id)
                    .execution_options(synchronize_session=False)
                )
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.expire_all()
        logger.info("Franchise %s movies set to %s", franchise_id, sorted(wanted))
