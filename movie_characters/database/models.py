"""
SQLAlchemy ORM models for the movie characters database.

This module defines the Character, Movie and Franchise tables together with
the CharacterMovie join table that realizes the many-to-many relation
between characters and movies.
"""

from typing import List, Optional
from sqlalchemy import Column, ForeignKey, Index, Integer, String, Table
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

# Largest value an INTEGER primary key can hold.
MAX_ID = 2**63 - 1


def id_in_range(entity_id: int) -> bool:
    """Whether a primary key value could name a stored row at all."""
    return 0 < entity_id <= MAX_ID


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


# Join rows disappear with either side; both referenced rows must exist.
character_movie = Table(
    'CharacterMovie',
    Base.metadata,
    Column(
        'character_id',
        Integer,
        ForeignKey('characters.id', ondelete='CASCADE'),
        primary_key=True,
    ),
    Column(
        'movie_id',
        Integer,
        ForeignKey('movies.id', ondelete='CASCADE'),
        primary_key=True,
    ),
    Index('idx_character_movie_movie', 'movie_id'),
)

class Character(Base):
    """
    Character table.

    Attributes:
        id: Primary key, auto-incremented
        name: Character name (required)
        alias: Alias or real name (optional)
        gender: Gender (required)
        image_url: URL to a picture of the character (optional)
    """
    __tablename__ = 'characters'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    alias: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    gender: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    # Relationships
    movies: Mapped[List["Movie"]] = relationship(
        "Movie",
        secondary=character_movie,
        back_populates="characters",
        order_by="Movie.id",
    )

    def __repr__(self) -> str:
        return f"<Character(id={self.id}, name='{self.name}', alias='{self.alias}')>"

class Franchise(Base):
    """
    Franchise table grouping movies.

    Attributes:
        id: Primary key, auto-incremented
        name: Franchise name (required)
        description: Short description (optional)
    """
    __tablename__ = 'franchises'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    # Relationships (no cascade: movies outlive their franchise)
    movies: Mapped[List["Movie"]] = relationship(
        "Movie",
        back_populates="franchise",
        order_by="Movie.id",
    )

    def __repr__(self) -> str:
        return f"<Franchise(id={self.id}, name='{self.name}')>"

class Movie(Base):
    """
    Movie table.

    Attributes:
        id: Primary key, auto-incremented
        title: Movie title (required)
        genre: Comma separated genres (required)
        year: Release year (required)
        director: Director name(s) (required)
        image_url: Poster URL (optional)
        trailer_url: Trailer URL (optional)
        franchise_id: Foreign key to franchises table (optional)
    """
    __tablename__ = 'movies'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    genre: Mapped[str] = mapped_column(String(100), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    director: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    trailer_url: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    franchise_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey('franchises.id', ondelete='RESTRICT'),
        nullable=True,
    )

    # Relationships
    franchise: Mapped[Optional["Franchise"]] = relationship(
        "Franchise",
        back_populates="movies",
    )
    characters: Mapped[List["Character"]] = relationship(
        "Character",
        secondary=character_movie,
        back_populates="movies",
        order_by="Character.id",
    )

    __table_args__ = (
        Index('idx_movies_franchise', 'franchise_id'),
    )

    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', year={self.year})>"
