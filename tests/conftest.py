"""Pytest configuration and fixtures."""

import random

import pytest

from crimsonnimbus.engine.arena_config import ArenaConfig, ArenaConfigManager
from crimsonnimbus.models.characters import CharacterStats, PlayerCharacter, ReferenceCharacter
from crimsonnimbus.models.identity import Identity, IdentityProfile
from crimsonnimbus.persistence.memory import InMemoryCharacterStore, InMemoryIdentityStore

ADMIN_ID = "100000000000000001"
OWNER_ID = "200000000000000002"
OTHER_ID = "300000000000000003"


def make_stats(value: int = 50, **overrides) -> CharacterStats:
    """Stats with every value set to ``value`` unless overridden."""
    data = {name: value for name in CharacterStats.model_fields}
    data.update(overrides)
    return CharacterStats(**data)


def make_reference(ref_id: int = 1, value: int = 50, **overrides) -> ReferenceCharacter:
    return ReferenceCharacter(
        id=ref_id,
        name=f"Reference {ref_id}",
        stats=make_stats(value, **overrides),
        image_prefix="https://img.example/",
        image_suffix=".png",
    )


@pytest.fixture
def identity_store():
    """Identity store holding the default owner with no high score."""
    store = InMemoryIdentityStore()
    store.save(Identity(id=OWNER_ID, user_name="owner", display_name="Owner"))
    store.save(Identity(id=OTHER_ID, user_name="rival", display_name="Rival"))
    return store


@pytest.fixture
def character_store(identity_store):
    """Character store with a seeded random source and no references."""
    return InMemoryCharacterStore(identity_store, rng=random.Random(1234))


@pytest.fixture
def add_character(character_store):
    """Factory that stores a player character for the default owner."""

    def _add(value: int = 50, owner_id: str = OWNER_ID, wins: int = 0, is_active: bool = True, **overrides):
        return character_store.save(
            PlayerCharacter(
                id=0,
                name="Hero",
                stats=make_stats(value, **overrides),
                wins=wins,
                is_active=is_active,
                owner_id=owner_id,
            )
        )

    return _add


@pytest.fixture
def owner_profile():
    """Profile of the default owner."""
    return IdentityProfile(id=OWNER_ID, user_name="owner", display_name="Owner", avatar="")


@pytest.fixture
def config_manager():
    """Config manager with a known administrator."""
    return ArenaConfigManager(ArenaConfig(admin_user_id=ADMIN_ID))
