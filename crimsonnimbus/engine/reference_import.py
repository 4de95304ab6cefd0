"""Administrative bulk replacement of the reference character set."""

import logging
from typing import Any, Iterable

from pydantic import ValidationError

from crimsonnimbus.engine.arena_config import ArenaConfigManager
from crimsonnimbus.errors import ForbiddenError, ValidationFailedError, violations_from
from crimsonnimbus.helpers.debug import log_call
from crimsonnimbus.models.characters import ReferenceCharacter
from crimsonnimbus.models.outcomes import ImportReport, RejectedCharacter
from crimsonnimbus.persistence.stores import CharacterStore

logger = logging.getLogger(__name__.split(".")[-1])

CHAR_ENTITY_ERR = "Problem exists with provided hero file."


class ReferenceImporter:
    """Validates imported reference characters and swaps them in."""

    def __init__(self, characters: CharacterStore, config_manager: ArenaConfigManager) -> None:
        self._characters = characters
        self._config_manager = config_manager

    @log_call
    def replace_all(self, caller_id: str, records: Iterable[dict[str, Any]]) -> ImportReport:
        """
        Replace the whole reference set with the valid records.

        Invalid records are reported, not imported. When none is valid the
        current set is left untouched.

        Args:
            caller_id: Authenticated caller identity id
            records: Raw reference character records

        Returns:
            ImportReport with the number added and the rejected records

        Raises:
            ForbiddenError: caller is not the configured administrator
            ValidationFailedError: no record is valid
        """
        admin_id = self._config_manager.config.admin_user_id
        if not admin_id or caller_id != admin_id:
            logger.warning(f"Identity {caller_id} attempted a reference import")
            raise ForbiddenError()

        accepted: list[ReferenceCharacter] = []
        rejected: list[RejectedCharacter] = []
        for record in records:
            try:
                accepted.append(ReferenceCharacter.model_validate(record))
            except ValidationError as e:
                rejected.append(RejectedCharacter(record=_as_dict(record), violations=violations_from(e)))

        if not accepted:
            first = rejected[0].violations if rejected else []
            logger.error(f"Reference import rejected every record, first violations: {first}")
            raise ValidationFailedError(first, CHAR_ENTITY_ERR)

        self._characters.replace_reference_characters(accepted)
        logger.info(f"Imported {len(accepted)} reference characters, rejected {len(rejected)}")
        return ImportReport(characters_added=len(accepted), unprocessable_characters=rejected)


def _as_dict(record: Any) -> dict[str, Any]:
    return dict(record) if isinstance(record, dict) else {"value": record}
