"""
Unit tests for MovieService.

Each test runs against a fresh in-memory SQLite database holding the
initial characters, movies and franchises.
"""

import pytest
from sqlalchemy import func, select

from movie_characters.database import DatabaseManager, crud
from movie_characters.database.models import character_movie
from movie_characters.database.seed import seed_database
from movie_characters.services import EntityNotFoundError, InvalidReferenceError, MovieService


@pytest.fixture
def session():
    """Seeded in-memory database session."""
    manager = DatabaseManager("sqlite://")
    manager.create_tables()
    session = manager.get_session()
    seed_database(session)
    yield session
    session.close()
    manager.close()


@pytest.fixture
def service(session):
    return MovieService(session)


def new_movie_fields(**overrides):
    fields = {
        "title": "Thor: Ragnarok",
        "genre": "Action, Comedy",
        "year": 2017,
        "director": "Taika Waititi",
        "image_url": None,
        "trailer_url": "https://example.com/trailer",
        "franchise_id": 1,
    }
    fields.update(overrides)
    return fields


def character_ids(service, movie_id):
    return [c.id for c in service.get_movie(movie_id).characters]


class TestMovieReads:
    """Tests for listing and fetching movies."""

    def test_get_all_movies(self, service):
        """Test that all movies come back with their characters."""
        movies = service.get_all_movies()

        assert [m.id for m in movies] == [1, 2, 3, 4]
        assert [c.id for c in movies[1].characters] == [1, 2, 3, 4]

    def test_get_movie(self, service):
        """Test retrieving a single movie."""
        movie = service.get_movie(3)

        assert movie.title == "The Dark Knight"
        assert movie.franchise_id is None
        assert [c.id for c in movie.characters] == [5]

    def test_get_movie_not_found(self, service):
        """Test that a missing movie gives None."""
        assert service.get_movie(99) is None

    def test_get_movie_id_out_of_range(self, service):
        """Test that ids no integer column can hold are simply not found."""
        assert service.get_movie(2**63) is None
        assert not service.movie_exists(-2**63 - 1)
        assert service.delete_movie(2**63) is False

    def test_movie_exists(self, service):
        """Test the existence predicate."""
        assert service.movie_exists(4)
        assert not service.movie_exists(5)

    def test_get_movie_characters(self, service):
        """Test listing the characters of a movie."""
        characters = service.get_movie_characters(1)
        assert [c.name for c in characters] == ["Thor", "Ironman", "Black Widow"]

    def test_get_movie_characters_missing_movie(self, service):
        """Test that asking for a missing movie's characters raises."""
        with pytest.raises(EntityNotFoundError):
            service.get_movie_characters(99)


class TestMovieWrites:
    """Tests for creating, updating and deleting movies."""

    def test_add_movie(self, service):
        """Test creating a movie assigns an id and keeps the fields."""
        movie = service.add_movie(new_movie_fields())

        assert movie.id == 5
        assert movie.title == "Thor: Ragnarok"
        assert movie.franchise_id == 1
        assert movie.characters == []

    def test_add_movie_without_franchise(self, service):
        """Test that the franchise reference is optional."""
        movie = service.add_movie(new_movie_fields(franchise_id=None))
        assert movie.franchise_id is None

    def test_add_movie_unknown_franchise(self, service):
        """Test that an unknown franchise id is rejected before insert."""
        with pytest.raises(InvalidReferenceError) as excinfo:
            service.add_movie(new_movie_fields(franchise_id=42))

        assert excinfo.value.missing_ids == [42]
        assert service.get_movie_count() == 4

    def test_update_movie(self, service):
        """Test replacing the scalar fields of a movie."""
        fields = new_movie_fields(title="Titanic (Remastered)", franchise_id=3)
        movie = service.update_movie(4, fields)

        assert movie.id == 4
        assert movie.title == "Titanic (Remastered)"
        assert movie.director == "Taika Waititi"
        assert movie.franchise_id == 3

    def test_update_movie_keeps_characters(self, service):
        """Test that a field update leaves the cast alone."""
        service.update_movie(1, new_movie_fields())
        assert character_ids(service, 1) == [1, 2, 3]

    def test_update_movie_not_found(self, service):
        """Test that updating a missing movie returns None."""
        assert service.update_movie(99, new_movie_fields()) is None

    def test_update_movie_unknown_franchise(self, service):
        """Test that an unknown franchise id is rejected on update."""
        with pytest.raises(InvalidReferenceError):
            service.update_movie(1, new_movie_fields(franchise_id=42))
        assert service.get_movie(1).franchise_id == 1

    def test_delete_movie(self, service, session):
        """Test deleting a movie removes its links but keeps its characters."""
        assert service.delete_movie(2) is True

        assert service.get_movie(2) is None
        assert session.scalar(
            select(func.count()).select_from(character_movie).where(character_movie.c.movie_id == 2)
        ) == 0
        spiderman = crud.get_character(session, 4)
        assert spiderman is not None
        assert spiderman.movies == []

    def test_delete_movie_not_found(self, service):
        """Test that deleting a missing movie returns False."""
        assert service.delete_movie(99) is False


class TestMovieCharacters:
    """Tests for replacing the characters of a movie."""

    def test_replace_characters(self, service):
        """Test that the cast becomes exactly the given ids."""
        service.update_movie_characters(3, [1, 4])
        assert character_ids(service, 3) == [1, 4]

    def test_replace_drops_unlisted_characters(self, service):
        """Test that previous links not in the list are removed."""
        service.update_movie_characters(2, [4])
        assert character_ids(service, 2) == [4]

    def test_replace_is_idempotent(self, service):
        """Test that repeating the same call changes nothing."""
        service.update_movie_characters(1, [2, 5])
        service.update_movie_characters(1, [2, 5])
        assert character_ids(service, 1) == [2, 5]

    def test_replace_collapses_duplicates(self, service):
        """Test that a repeated id links once."""
        service.update_movie_characters(4, [3, 3, 3])
        assert character_ids(service, 4) == [3]

    def test_replace_with_empty_list(self, service):
        """Test that an empty list clears the cast."""
        service.update_movie_characters(1, [])
        assert character_ids(service, 1) == []

    def test_replace_unknown_character(self, service):
        """Test that one unknown id aborts the whole replacement."""
        with pytest.raises(InvalidReferenceError) as excinfo:
            service.update_movie_characters(1, [4, 77, 5, 78])

        assert excinfo.value.missing_ids == [77, 78]
        assert character_ids(service, 1) == [1, 2, 3]

    def test_replace_with_out_of_range_character(self, service):
        """Test that an id beyond 64 bits is reported as missing."""
        with pytest.raises(InvalidReferenceError) as excinfo:
            service.update_movie_characters(1, [2, 2**63])

        assert excinfo.value.missing_ids == [2**63]
        assert character_ids(service, 1) == [1, 2, 3]

    def test_replace_missing_movie(self, service):
        """Test that the movie itself must exist."""
        with pytest.raises(EntityNotFoundError):
            service.update_movie_characters(99, [1])

    def test_character_side_reflects_replacement(self, service, session):
        """Test that characters see the new links too."""
        service.update_movie_characters(4, [5])
        batman = crud.get_character(session, 5)
        assert [m.id for m in batman.movies] == [3, 4]
