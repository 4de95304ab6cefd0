"""Store interfaces the arena services depend on."""

from typing import Optional, Protocol

from crimsonnimbus.models.characters import PlayerCharacter, ReferenceCharacter
from crimsonnimbus.models.identity import Identity
from crimsonnimbus.models.outcomes import SortSpec


class CharacterStore(Protocol):
    """Player and reference character persistence."""

    def find_by_id(self, character_id: int) -> Optional[PlayerCharacter]:
        ...

    def save(self, character: PlayerCharacter) -> PlayerCharacter:
        """
        Persist a character with a version check.

        A character whose id is unknown is inserted; ``id`` 0 asks the store to
        generate one. An existing character is only overwritten when the stored
        version equals ``character.version``.

        Returns:
            The stored copy, with its version incremented

        Raises:
            ConflictError: stored version differs (another request won the race)
        """
        ...

    def list_characters(self, where: Optional[str], sort: SortSpec) -> list[PlayerCharacter]:
        """List characters whose owner user name or owner id ends with ``where``."""
        ...

    def random_reference_character(self) -> Optional[ReferenceCharacter]:
        """Uniformly drawn reference character, or None if the pool is empty."""
        ...

    def random_reference_characters(self, count: int) -> list[ReferenceCharacter]:
        """Up to ``count`` distinct, uniformly drawn reference characters."""
        ...

    def count_reference_characters(self) -> int:
        ...

    def replace_reference_characters(self, characters: list[ReferenceCharacter]) -> None:
        """Atomically replace the whole reference set."""
        ...


class IdentityStore(Protocol):
    """Identity persistence keyed by the external identity id."""

    def find_by_id(self, identity_id: str) -> Optional[Identity]:
        ...

    def save(self, identity: Identity) -> Identity:
        """
        Persist an identity with a version check.

        Raises:
            ConflictError: stored version differs from ``identity.version``
        """
        ...

    def add_character(self, identity_id: str, character_id: int) -> Optional[Identity]:
        """Append a character id to the stored identity; None if it does not exist."""
        ...

    def raise_high_score(self, identity_id: str, score: int) -> Optional[Identity]:
        """Set the stored high score to ``score`` if that is higher; None if the identity does not exist."""
        ...
