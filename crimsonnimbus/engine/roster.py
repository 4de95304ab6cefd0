"""Player character creation and browsing."""

import logging
from typing import Any, Optional, Union

from pydantic import ValidationError

from crimsonnimbus.engine.arena_config import ArenaConfigManager
from crimsonnimbus.engine.guards import load_character
from crimsonnimbus.engine.identities import IdentityRegistry
from crimsonnimbus.engine.sorting import SortSpecResolver
from crimsonnimbus.errors import ServiceUnavailableError, ValidationFailedError, violations_from
from crimsonnimbus.helpers.debug import log_call
from crimsonnimbus.models.characters import NewCharacter, PlayerCharacter, ReferenceCharacter
from crimsonnimbus.models.identity import IdentityProfile
from crimsonnimbus.persistence.stores import CharacterStore, IdentityStore

logger = logging.getLogger(__name__.split(".")[-1])

INTERNAL_CHAR_ERR = "Internal character database is unavailable."


class CharacterRoster:
    """Creates, fetches and lists player characters."""

    def __init__(
        self,
        characters: CharacterStore,
        identities: IdentityStore,
        config_manager: Optional[ArenaConfigManager] = None,
    ) -> None:
        self._characters = characters
        self._identities = identities
        self._registry = IdentityRegistry(identities)
        self._config_manager = config_manager or ArenaConfigManager()

    @log_call
    def create(self, profile: IdentityProfile, payload: Union[NewCharacter, dict[str, Any]]) -> PlayerCharacter:
        """
        Create a character for the caller.

        The caller's identity is registered on first use. Streak and activity
        always start fresh regardless of what the payload carries.

        Args:
            profile: Authenticated caller profile
            payload: NewCharacter or its raw dict form

        Returns:
            Stored PlayerCharacter

        Raises:
            ValidationFailedError: payload violates field constraints
        """
        if not isinstance(payload, NewCharacter):
            try:
                payload = NewCharacter.model_validate(payload)
            except ValidationError as e:
                violations = violations_from(e)
                logger.warning(f"Rejected character from {profile.id}: {violations}")
                raise ValidationFailedError(violations) from e

        owner = self._identities.find_by_id(profile.id) or self._registry.login(profile)
        character = self._characters.save(
            PlayerCharacter(
                id=0,
                name=payload.name,
                stats=payload.stats,
                url=payload.url,
                wins=0,
                is_active=True,
                owner_id=owner.id,
            )
        )
        self._identities.add_character(owner.id, character.id)
        logger.info(f"Identity {owner.id} created character {character.id} ({character.name})")
        return character

    def get(self, character_id: Union[int, str, None]) -> PlayerCharacter:
        """Get one character by id."""
        return load_character(self._characters, character_id)

    def list_characters(
        self,
        where: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> list[PlayerCharacter]:
        """
        List characters, optionally filtered by owner.

        Args:
            where: Suffix matched against owner user name or owner id
            sort_by: Requested sort field
            sort_order: Requested sort order

        Returns:
            Ordered characters
        """
        sort = SortSpecResolver.resolve(sort_by, sort_order, self._config_manager.config.character_sort_fields)
        return self._characters.list_characters(where or None, sort)

    def new_roll(self) -> list[ReferenceCharacter]:
        """Draw the distinct reference characters offered when designing a character."""
        count = self._config_manager.config.new_roll_size
        characters = self._characters.random_reference_characters(count)
        if len(characters) != count:
            logger.error(f"New roll needs {count} reference characters, store returned {len(characters)}")
            raise ServiceUnavailableError(INTERNAL_CHAR_ERR)
        return characters
