"""
Pydantic schemas for Movie API.
"""

from pydantic import BaseModel, Field

from movie_characters.api.models.common import Int64


class MovieCreate(BaseModel):
    """Request body for creating a movie."""

    title: str = Field(..., min_length=1, max_length=100)
    genre: str = Field(..., min_length=1, max_length=100)
    year: Int64
    director: str = Field(..., min_length=1, max_length=100)
    image_url: str | None = Field(None, max_length=200)
    trailer_url: str | None = Field(None, max_length=200)
    franchise: Int64 | None = None  # franchise id


class MovieUpdate(MovieCreate):
    """Request body for replacing a movie; id must match the route."""

    id: Int64


class MovieRead(BaseModel):
    """Response model for a movie, characters flattened to ids."""

    id: int
    title: str
    genre: str
    year: int
    director: str
    image_url: str | None
    trailer_url: str | None
    franchise: int | None
    characters: list[int]
