"""
Movie API endpoints.
"""

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from movie_characters.api.dependencies import get_movie_service
from movie_characters.api.mappers import character_to_read, movie_fields, movie_to_read
from movie_characters.api.models.character import CharacterRead
from movie_characters.api.models.common import Int64
from movie_characters.api.models.movie import MovieCreate, MovieRead, MovieUpdate
from movie_characters.services import EntityNotFoundError, InvalidReferenceError, MovieService

router = APIRouter(prefix="/api/movies", tags=["movies"])


@router.get("", response_model=list[MovieRead])
def list_movies(service: MovieService = Depends(get_movie_service)):
    """List all movies with the ids of their characters."""
    return [movie_to_read(m) for m in service.get_all_movies()]


@router.get("/{movie_id}", response_model=MovieRead)
def get_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Get movie details by ID."""
    movie = service.get_movie(movie_id)
    if not movie:
        raise HTTPException(status_code=404, detail="Movie not found")
    return movie_to_read(movie)


@router.get("/{movie_id}/characters", response_model=list[CharacterRead])
def get_movie_characters(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """List the characters appearing in a movie."""
    try:
        characters = service.get_movie_characters(movie_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [character_to_read(c) for c in characters]


@router.post("", response_model=MovieRead, status_code=status.HTTP_201_CREATED)
def create_movie(
    movie_in: MovieCreate,
    request: Request,
    response: Response,
    service: MovieService = Depends(get_movie_service),
):
    """Create a movie; the id is assigned by the server."""
    try:
        movie = service.add_movie(movie_fields(movie_in))
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    response.headers["Location"] = str(request.url_for("get_movie", movie_id=movie.id))
    return movie_to_read(movie)


@router.put("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_movie(movie_id: int, movie_in: MovieUpdate, service: MovieService = Depends(get_movie_service)):
    """Replace a movie's fields. Characters are managed via /characters."""
    if movie_id != movie_in.id:
        raise HTTPException(status_code=400, detail="Route id and body id differ")
    try:
        movie = service.update_movie(movie_id, movie_fields(movie_in))
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if movie is None:
        raise HTTPException(status_code=404, detail="Movie not found")


@router.delete("/{movie_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_movie(movie_id: int, service: MovieService = Depends(get_movie_service)):
    """Delete a movie and its character links."""
    if not service.delete_movie(movie_id):
        raise HTTPException(status_code=404, detail="Movie not found")


@router.put("/{movie_id}/characters", status_code=status.HTTP_204_NO_CONTENT)
def update_movie_characters(
    movie_id: int,
    character_ids: list[Int64] = Body(...),
    service: MovieService = Depends(get_movie_service),
):
    """Set the movie's characters to exactly the given ids."""
    try:
        service.update_movie_characters(movie_id, character_ids)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=str(e))
