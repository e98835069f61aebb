"""
Pydantic schemas for API request/response validation.
"""

from movie_characters.api.models.character import CharacterCreate, CharacterUpdate, CharacterRead
from movie_characters.api.models.movie import MovieCreate, MovieUpdate, MovieRead
from movie_characters.api.models.franchise import FranchiseCreate, FranchiseUpdate, FranchiseRead
from movie_characters.api.models.common import Int64

__all__ = [
    "Int64",
    "CharacterCreate",
    "CharacterUpdate",
    "CharacterRead",
    "MovieCreate",
    "MovieUpdate",
    "MovieRead",
    "FranchiseCreate",
    "FranchiseUpdate",
    "FranchiseRead",
]
