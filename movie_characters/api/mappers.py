"""
Conversions between ORM entities and API schemas.

Entity -> read schema functions flatten relationship collections to lists of
ids. Create/update schema -> column dict functions only emit client-settable
scalar columns: never the id, never a relationship.
"""

from typing import Any, Dict

from movie_characters.api.models import (
    CharacterCreate, CharacterRead,
    FranchiseCreate, FranchiseRead,
    MovieCreate, MovieRead,
)
from movie_characters.database.models import Character, Franchise, Movie


# ==================== ENTITY -> READ ====================

def character_to_read(character: Character) -> CharacterRead:
    return CharacterRead(
        id=character.id,
        name=character.name,
        alias=character.alias,
        gender=character.gender,
        image_url=character.image_url,
        movies=[m.id for m in character.movies],
    )


def movie_to_read(movie: Movie) -> MovieRead:
    return MovieRead(
        id=movie.id,
        title=movie.title,
        genre=movie.genre,
        year=movie.year,
        director=movie.director,
        image_url=movie.image_url,
        trailer_url=movie.trailer_url,
        franchise=movie.franchise_id,
        characters=[c.id for c in movie.characters],
    )


def franchise_to_read(franchise: Franchise) -> FranchiseRead:
    return FranchiseRead(
        id=franchise.id,
        name=franchise.name,
        description=franchise.description,
        movies=[m.id for m in franchise.movies],
    )


# ==================== CREATE/UPDATE -> COLUMNS ====================

def character_fields(dto: CharacterCreate) -> Dict[str, Any]:
    """Column values for a character create or update body."""
    return {
        "name": dto.name,
        "alias": dto.alias,
        "gender": dto.gender,
        "image_url": dto.image_url,
    }


def movie_fields(dto: MovieCreate) -> Dict[str, Any]:
    """Column values for a movie body; `franchise` lands in franchise_id."""
    return {
        "title": dto.title,
        "genre": dto.genre,
        "year": dto.year,
        "director": dto.director,
        "image_url": dto.image_url,
        "trailer_url": dto.trailer_url,
        "franchise_id": dto.franchise,
    }


def franchise_fields(dto: FranchiseCreate) -> Dict[str, Any]:
    """Column values for a franchise create or update body."""
    return {
        "name": dto.name,
        "description": dto.description,
    }
