"""In-process stores backing the arena services."""

import logging
import random
import threading
from typing import Optional

from crimsonnimbus.errors import ConflictError, InvalidArgumentError
from crimsonnimbus.models.characters import PlayerCharacter, ReferenceCharacter
from crimsonnimbus.models.identity import Identity
from crimsonnimbus.models.outcomes import SortSpec

logger = logging.getLogger(__name__.split(".")[-1])


class InMemoryIdentityStore:
    """
    Identities held in a dict keyed by identity id.

    ``save`` is compare-and-swap on ``Identity.version``. Growing the character
    list and raising the high score are applied to the stored record under the
    lock, so they never write back a stale copy.
    """

    def __init__(self) -> None:
        self._identities: dict[str, Identity] = {}
        self._lock = threading.Lock()

    def find_by_id(self, identity_id: str) -> Optional[Identity]:
        with self._lock:
            return self._identities.get(identity_id)

    def save(self, identity: Identity) -> Identity:
        with self._lock:
            stored = self._identities.get(identity.id)
            if stored is not None and stored.version != identity.version:
                logger.warning(
                    f"Rejected stale write to identity {identity.id}: "
                    f"version {identity.version}, stored {stored.version}"
                )
                raise ConflictError(f"Identity {identity.id} was modified by another request")
            return self._store(identity, {})

    def add_character(self, identity_id: str, character_id: int) -> Optional[Identity]:
        with self._lock:
            stored = self._identities.get(identity_id)
            if stored is None:
                return None
            return self._store(stored, {"character_ids": [*stored.character_ids, character_id]})

    def raise_high_score(self, identity_id: str, score: int) -> Optional[Identity]:
        with self._lock:
            stored = self._identities.get(identity_id)
            if stored is None or score <= stored.high_score:
                return stored
            return self._store(stored, {"high_score": score})

    def _store(self, identity: Identity, update: dict) -> Identity:
        saved = identity.model_copy(update={**update, "version": identity.version + 1})
        self._identities[saved.id] = saved
        return saved


class InMemoryCharacterStore:
    """
    Player and reference characters held in dicts.

    Saves are compare-and-swap on ``PlayerCharacter.version``. Random draws pick
    ids from the reference index instead of shuffling the reference set.
    """

    def __init__(self, identities: InMemoryIdentityStore, rng: Optional[random.Random] = None) -> None:
        """
        Initialize store.

        Args:
            identities: Identity store used to resolve owners in list queries
            rng: Optional random source (seed it for reproducible draws)
        """
        self._identities = identities
        self._rng = rng or random.Random()
        self._characters: dict[int, PlayerCharacter] = {}
        self._references: dict[int, ReferenceCharacter] = {}
        self._reference_ids: list[int] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def find_by_id(self, character_id: int) -> Optional[PlayerCharacter]:
        with self._lock:
            return self._characters.get(character_id)

    def save(self, character: PlayerCharacter) -> PlayerCharacter:
        with self._lock:
            if character.id == 0:
                character = character.model_copy(update={"id": self._next_id, "version": 0})

            stored = self._characters.get(character.id)
            if stored is not None and stored.version != character.version:
                logger.warning(
                    f"Rejected stale write to character {character.id}: "
                    f"version {character.version}, stored {stored.version}"
                )
                raise ConflictError(f"Character {character.id} was modified by another request")

            saved = character.model_copy(update={"version": character.version + 1})
            self._characters[saved.id] = saved
            self._next_id = max(self._next_id, saved.id + 1)
            return saved

    def list_characters(self, where: Optional[str], sort: SortSpec) -> list[PlayerCharacter]:
        with self._lock:
            characters = list(self._characters.values())

        owners = {c.owner_id: self._identities.find_by_id(c.owner_id) for c in characters}
        # "%" is the match-everything pattern clients send by default
        if where and where != "%":
            characters = [
                c for c in characters
                if c.owner_id.endswith(where)
                or (owners[c.owner_id] is not None and owners[c.owner_id].user_name.endswith(where))
            ]

        def _sort_key(character: PlayerCharacter):
            owner = owners[character.owner_id]
            if sort.field == "creator":
                return (character.owner_id, character.id)
            if sort.field == "creator.userName":
                return (owner.user_name if owner else "", character.id)
            if sort.field == "id":
                return (character.id,)
            raise InvalidArgumentError(f"Unsupported sort field: {sort.field}")

        return sorted(characters, key=_sort_key, reverse=sort.descending)

    def random_reference_character(self) -> Optional[ReferenceCharacter]:
        with self._lock:
            if not self._reference_ids:
                return None
            return self._references[self._rng.choice(self._reference_ids)]

    def random_reference_characters(self, count: int) -> list[ReferenceCharacter]:
        with self._lock:
            ids = self._rng.sample(self._reference_ids, min(count, len(self._reference_ids)))
            return [self._references[i] for i in ids]

    def count_reference_characters(self) -> int:
        with self._lock:
            return len(self._reference_ids)

    def replace_reference_characters(self, characters: list[ReferenceCharacter]) -> None:
        references = {c.id: c for c in characters}
        with self._lock:
            self._references = references
            self._reference_ids = list(references)
        logger.info(f"Reference set replaced with {len(references)} characters")
