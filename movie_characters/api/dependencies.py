"""
FastAPI dependency injection for database sessions and services.
"""

from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from movie_characters.database.connection import DatabaseManager
from movie_characters.services import FranchiseService, MovieService


def get_db_manager(request: Request) -> DatabaseManager:
    """Return the DatabaseManager owned by the running application."""
    return request.app.state.db_manager


def get_db(db_manager: DatabaseManager = Depends(get_db_manager)) -> Generator[Session, None, None]:
    """Yield a database session scoped to the current request."""
    with db_manager.session_scope() as session:
        yield session


def get_movie_service(db: Session = Depends(get_db)) -> MovieService:
    return MovieService(db)


def get_franchise_service(db: Session = Depends(get_db)) -> FranchiseService:
    return FranchiseService(db)
