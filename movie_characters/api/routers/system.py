"""
System API endpoints (health).
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from movie_characters.api.dependencies import get_db
from movie_characters.database import crud
from movie_characters.services import FranchiseService, MovieService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["system"])


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check: database reachable and entity counts."""
    try:
        character_count = crud.get_character_count(db)
        movie_count = MovieService(db).get_movie_count()
        franchise_count = FranchiseService(db).get_franchise_count()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error("Health check failed: %s", e)
        return {"status": "unhealthy", "database": str(e)}
    return {
        "status": "healthy",
        "database": "connected",
        "characters": character_count,
        "movies": movie_count,
        "franchises": franchise_count,
    }
