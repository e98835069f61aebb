"""
FastAPI application entry point for the Movie Characters API.

Run with:
    uvicorn movie_characters.api.main:create_app --factory --host 0.0.0.0 --port 8000

or through the movie-characters-api console script. Nothing is built at import
time; each create_app() call opens its own database.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from movie_characters import __version__
from movie_characters.api.config import (
    get_api_host, get_api_port, get_database_url, get_log_level, get_seed_database, get_sql_echo,
)
from movie_characters.api.routers import characters, movies, franchises, system
from movie_characters.database import DatabaseManager, init_database
from movie_characters.utils.logging_config import configure_api_logging

logger = logging.getLogger(__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies and parameters as 400 Bad Request."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app(database_url: Optional[str] = None, seed: Optional[bool] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        database_url: SQLAlchemy URL; defaults to the DATABASE_URL setting
        seed: Load the initial data into an empty database on startup;
            defaults to the SEED_DATABASE setting

    Returns:
        Configured FastAPI instance owning its DatabaseManager
    """
    db_manager = DatabaseManager(database_url or get_database_url(), echo=get_sql_echo())
    seed = get_seed_database() if seed is None else seed

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        init_database(db_manager, seed=seed)
        yield
        db_manager.close()

    app = FastAPI(
        title="Movie Characters API",
        description="REST API for movies, the characters appearing in them, and franchises",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.db_manager = db_manager

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(characters.router)
    app.include_router(movies.router)
    app.include_router(franchises.router)
    app.include_router(system.router)

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "message": "Movie Characters API",
            "docs": "/docs",
            "health": "/api/health",
        }

    return app


def main():
    """Configure logging and serve the API with uvicorn."""
    import uvicorn

    configure_api_logging(level=get_log_level())
    uvicorn.run(create_app(), host=get_api_host(), port=get_api_port(), log_config=None)


if __name__ == "__main__":
    main()
