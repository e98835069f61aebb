"""
Pydantic schemas for Franchise API.
"""

from pydantic import BaseModel, Field

from movie_characters.api.models.common import Int64


class FranchiseCreate(BaseModel):
    """Request body for creating a franchise."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=200)


class FranchiseUpdate(FranchiseCreate):
    """Request body for replacing a franchise; id must match the route."""

    id: Int64


class FranchiseRead(BaseModel):
    """Response model for a franchise, movies flattened to ids."""

    id: int
    name: str
    description: str | None
    movies: list[int]
