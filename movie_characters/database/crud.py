"""
CRUD operations for the Character model.

Characters are managed with plain session-level functions; movies and
franchises go through the service classes in movie_characters.services.
"""

import logging
from typing import List, Optional, Dict, Any
from sqlalchemy import func, select, update
from sqlalchemy.orm import Session, selectinload

from movie_characters.database.models import Character, id_in_range

logger = logging.getLogger(__name__)


# ==================== CHARACTER CRUD OPERATIONS ====================

def create_character(session: Session, fields: Dict[str, Any]) -> Character:
    """
    Create a new character.

    Args:
        session: Database session
        fields: Column values (name, alias, gender, image_url)

    Returns:
        Created Character object with its server-assigned id
    """
    character = Character(**fields)
    session.add(character)
    session.commit()
    session.refresh(character)
    logger.info("Created character %s (%s)", character.id, character.name)
    return character


def get_character(session: Session, character_id: int) -> Optional[Character]:
    """
    Get a character by ID, with its movies loaded.

    Args:
        session: Database session
        character_id: Character ID

    Returns:
        Character object or None if not found
    """
    if not id_in_range(character_id):
        return None
    return session.scalars(
        select(Character)
        .options(selectinload(Character.movies))
        .where(Character.id == character_id)
    ).first()


def get_characters(session: Session) -> List[Character]:
    """
    Get all characters with their movies.

    Args:
        session: Database session

    Returns:
        List of Character objects ordered by id
    """
    return list(session.scalars(
        select(Character)
        .options(selectinload(Character.movies))
        .order_by(Character.id)
    ))


def get_character_count(session: Session) -> int:
    """Get total count of characters."""
    return session.scalar(select(func.count(Character.id)))


def character_exists(session: Session, character_id: int) -> bool:
    """Check whether a character with the given id exists."""
    if not id_in_range(character_id):
        return False
    return session.scalar(
        select(Character.id).where(Character.id == character_id)
    ) is not None


def update_character(
    session: Session,
    character_id: int,
    fields: Dict[str, Any]
) -> Optional[Character]:
    """
    Replace the scalar fields of a character.

    Args:
        session: Database session
        character_id: Character ID
        fields: Column values to write; every client-settable column

    Returns:
        Updated Character object or None if not found
    """
    if not character_exists(session, character_id):
        return None

    result = session.execute(
        update(Character).where(Character.id == character_id).values(**fields)
    )
    if result.rowcount == 0:
        # Row deleted between the existence check and the update
        session.rollback()
        return None
    session.commit()
    logger.info("Updated character %s", character_id)
    return get_character(session, character_id)


def delete_character(session: Session, character_id: int) -> bool:
    """
    Delete a character. Its CharacterMovie rows go with it; movies stay.

    Args:
        session: Database session
        character_id: Character ID

    Returns:
        True if character was deleted, False if not found
    """
    if not id_in_range(character_id):
        return False
    character = session.get(Character, character_id)
    if character:
        session.delete(character)
        session.commit()
        logger.info("Deleted character %s", character_id)
        return True
    return False
