"""Stat reroll: swap one stat with a random reference character's."""

import logging
from typing import Union

from crimsonnimbus.engine.guards import load_active_owned_character
from crimsonnimbus.errors import ServiceUnavailableError
from crimsonnimbus.helpers.debug import log_call
from crimsonnimbus.models.outcomes import RerollResult
from crimsonnimbus.models.stats import STAT_CATALOG, StatCatalog
from crimsonnimbus.persistence.stores import CharacterStore

logger = logging.getLogger(__name__.split(".")[-1])

INTERNAL_CHAR_ERR = "Internal character database is unavailable."


class RerollEngine:
    """Replaces one stat of a player character with a random donor's value."""

    def __init__(self, characters: CharacterStore, catalog: StatCatalog = STAT_CATALOG) -> None:
        self._characters = characters
        self._catalog = catalog

    @log_call
    def reroll(
        self,
        owner_id: str,
        character_id: Union[int, str, None],
        stat_selector: Union[int, str, None],
    ) -> RerollResult:
        """
        Reroll one stat.

        Args:
            owner_id: Authenticated caller identity id
            character_id: Character to modify
            stat_selector: Legacy 1-based stat index (or stat name)

        Returns:
            RerollResult with the updated character and the donor

        Raises:
            InvalidArgumentError: malformed id or unknown stat
            NotFoundError: character does not exist
            ForbiddenError: caller does not own the character
            InvalidStateError: character has retired
            ServiceUnavailableError: reference pool is empty
            ConflictError: character changed concurrently
        """
        character = load_active_owned_character(self._characters, owner_id, character_id)
        stat = self._catalog.resolve(stat_selector)

        donor = self._characters.random_reference_character()
        if donor is None:
            raise ServiceUnavailableError(INTERNAL_CHAR_ERR)

        previous_value = character.stats.value_of(stat.name)
        new_value = donor.stats.value_of(stat.name)
        updated = character.model_copy(
            update={"stats": character.stats.with_value(stat.name, new_value)}
        )
        saved = self._characters.save(updated)

        logger.info(
            f"Rerolled {stat.name} of character {saved.id}: {previous_value} -> {new_value} "
            f"(donor {donor.id} {donor.name})"
        )
        return RerollResult(character=saved, donor=donor, stat=stat.name, previous_value=previous_value)
