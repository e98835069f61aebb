"""
Franchise API endpoints.
"""

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response, status

from movie_characters.api.dependencies import get_franchise_service
from movie_characters.api.mappers import (
    character_to_read, franchise_fields, franchise_to_read, movie_to_read,
)
from movie_characters.api.models.character import CharacterRead
from movie_characters.api.models.common import Int64
from movie_characters.api.models.franchise import FranchiseCreate, FranchiseRead, FranchiseUpdate
from movie_characters.api.models.movie import MovieRead
from movie_characters.services import EntityNotFoundError, FranchiseService, InvalidReferenceError

router = APIRouter(prefix="/api/franchises", tags=["franchises"])


@router.get("", response_model=list[FranchiseRead])
def list_franchises(service: FranchiseService = Depends(get_franchise_service)):
    """List all franchises with the ids of their movies."""
    return [franchise_to_read(f) for f in service.get_all_franchises()]


@router.get("/{franchise_id}", response_model=FranchiseRead)
def get_franchise(franchise_id: int, service: FranchiseService = Depends(get_franchise_service)):
    """Get franchise details by ID."""
    franchise = service.get_franchise(franchise_id)
    if not franchise:
        raise HTTPException(status_code=404, detail="Franchise not found")
    return franchise_to_read(franchise)


@router.get("/{franchise_id}/movies", response_model=list[MovieRead])
def get_franchise_movies(franchise_id: int, service: FranchiseService = Depends(get_franchise_service)):
    """List the movies of a franchise."""
    try:
        movies = service.get_franchise_movies(franchise_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [movie_to_read(m) for m in movies]


@router.get("/{franchise_id}/characters", response_model=list[CharacterRead])
def get_franchise_characters(franchise_id: int, service: FranchiseService = Depends(get_franchise_service)):
    """List every character appearing in the franchise's movies, once each."""
    try:
        characters = service.get_franchise_characters(franchise_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return [character_to_read(c) for c in characters]


@router.post("", response_model=FranchiseRead, status_code=status.HTTP_201_CREATED)
def create_franchise(
    franchise_in: FranchiseCreate,
    request: Request,
    response: Response,
    service: FranchiseService = Depends(get_franchise_service),
):
    """Create a franchise; the id is assigned by the server."""
    franchise = service.add_franchise(franchise_fields(franchise_in))
    response.headers["Location"] = str(request.url_for("get_franchise", franchise_id=franchise.id))
    return franchise_to_read(franchise)


@router.put("/{franchise_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_franchise(
    franchise_id: int,
    franchise_in: FranchiseUpdate,
    service: FranchiseService = Depends(get_franchise_service),
):
    """Replace a franchise's fields. Movies are managed via /movies."""
    if franchise_id != franchise_in.id:
        raise HTTPException(status_code=400, detail="Route id and body id differ")
    if service.update_franchise(franchise_id, franchise_fields(franchise_in)) is None:
        raise HTTPException(status_code=404, detail="Franchise not found")


@router.delete("/{franchise_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_franchise(franchise_id: int, service: FranchiseService = Depends(get_franchise_service)):
    """Delete a franchise; its movies are kept without a franchise."""
    if not service.delete_franchise(franchise_id):
        raise HTTPException(status_code=404, detail="Franchise not found")


@router.put("/{franchise_id}/movies", status_code=status.HTTP_204_NO_CONTENT)
def update_franchise_movies(
    franchise_id: int,
    movie_ids: list[Int64] = Body(...),
    service: FranchiseService = Depends(get_franchise_service),
):
    """Set the franchise's movies to exactly the given ids."""
    try:
        service.update_franchise_movies(franchise_id, movie_ids)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=str(e))
