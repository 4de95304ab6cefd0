"""Precondition checks shared by reroll and battle."""

import logging
from typing import Union

from crimsonnimbus.errors import (
    ForbiddenError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
)
from crimsonnimbus.models.characters import PlayerCharacter
from crimsonnimbus.persistence.stores import CharacterStore

logger = logging.getLogger(__name__.split(".")[-1])

MISSING_ID_ERR = "ID must be provided and numeric"
UNAUTHORIZED_ERR = "Only the character's creator can make changes"
NOT_ON_DUTY_ERR = "Character {character_id} is not on duty"


def parse_character_id(raw_id: Union[int, str, None]) -> int:
    """Parse a client-supplied character id."""
    if isinstance(raw_id, bool):
        raise InvalidArgumentError(MISSING_ID_ERR)
    if isinstance(raw_id, int):
        character_id = raw_id
    else:
        try:
            character_id = int(str(raw_id).strip())
        except ValueError:
            raise InvalidArgumentError(MISSING_ID_ERR) from None
    if character_id <= 0:
        raise InvalidArgumentError(MISSING_ID_ERR)
    return character_id


def load_character(store: CharacterStore, raw_id: Union[int, str, None]) -> PlayerCharacter:
    """Load a character or raise NotFoundError."""
    character_id = parse_character_id(raw_id)
    character = store.find_by_id(character_id)
    if character is None:
        raise NotFoundError(f"Character of ID {character_id} is not found")
    return character


def load_active_owned_character(
    store: CharacterStore, owner_id: str, raw_id: Union[int, str, None]
) -> PlayerCharacter:
    """
    Load a character the caller may act with.

    Checks run in order: id well-formed, character exists, caller owns it,
    character is still active.
    """
    character = load_character(store, raw_id)
    if character.owner_id != owner_id:
        logger.warning(f"Identity {owner_id} tried to act with character {character.id} it does not own")
        raise ForbiddenError(UNAUTHORIZED_ERR)
    if not character.is_active:
        raise InvalidStateError(NOT_ON_DUTY_ERR.format(character_id=character.id))
    return character
