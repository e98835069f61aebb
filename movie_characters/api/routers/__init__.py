"""
API route handlers.
"""

from movie_characters.api.routers import characters, movies, franchises, system

__all__ = ["characters", "movies", "franchises", "system"]
