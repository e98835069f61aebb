"""
Character API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from movie_characters.api.dependencies import get_db
from movie_characters.api.mappers import character_fields, character_to_read
from movie_characters.api.models.character import CharacterCreate, CharacterRead, CharacterUpdate
from movie_characters.database import crud

router = APIRouter(prefix="/api/characters", tags=["characters"])


@router.get("", response_model=list[CharacterRead])
def list_characters(db: Session = Depends(get_db)):
    """List all characters with the ids of the movies they appear in."""
    return [character_to_read(c) for c in crud.get_characters(db)]


@router.get("/{character_id}", response_model=CharacterRead)
def get_character(character_id: int, db: Session = Depends(get_db)):
    """Get a character by ID."""
    character = crud.get_character(db, character_id)
    if not character:
        raise HTTPException(status_code=404, detail="Character not found")
    return character_to_read(character)


@router.post("", response_model=CharacterRead, status_code=status.HTTP_201_CREATED)
def create_character(
    character_in: CharacterCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
):
    """Create a character; the id is assigned by the server."""
    character = crud.create_character(db, character_fields(character_in))
    response.headers["Location"] = str(request.url_for("get_character", character_id=character.id))
    return character_to_read(character)


@router.put("/{character_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_character(character_id: int, character_in: CharacterUpdate, db: Session = Depends(get_db)):
    """Replace a character's fields."""
    if character_id != character_in.id:
        raise HTTPException(status_code=400, detail="Route id and body id differ")
    if crud.update_character(db, character_id, character_fields(character_in)) is None:
        raise HTTPException(status_code=404, detail="Character not found")


@router.delete("/{character_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_character(character_id: int, db: Session = Depends(get_db)):
    """Delete a character and its movie links."""
    if not crud.delete_character(db, character_id):
        raise HTTPException(status_code=404, detail="Character not found")
