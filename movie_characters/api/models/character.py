"""
Pydantic schemas for Character API.
"""

from pydantic import BaseModel, Field

from movie_characters.api.models.common import Int64


class CharacterCreate(BaseModel):
    """Request body for creating a character."""

    name: str = Field(..., min_length=1, max_length=100)
    alias: str | None = Field(None, max_length=100)
    gender: str = Field(..., min_length=1, max_length=100)
    image_url: str | None = Field(None, max_length=200)


class CharacterUpdate(CharacterCreate):
    """Request body for replacing a character; id must match the route."""

    id: Int64


class CharacterRead(BaseModel):
    """Response model for a character, movies flattened to ids."""

    id: int
    name: str
    alias: str | None
    gender: str
    image_url: str | None
    movies: list[int]
