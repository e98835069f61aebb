"""
Service layer for movies and franchises.

Each service wraps a database session and exposes the domain operations the
API routers need.
"""

from movie_characters.services.exceptions import EntityNotFoundError, InvalidReferenceError
from movie_characters.services.movie_service import MovieService
from movie_characters.services.franchise_service import FranchiseService

__all__ = [
    'EntityNotFoundError',
    'InvalidReferenceError',
    'MovieService',
    'FranchiseService',
]
