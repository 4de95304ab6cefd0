"""Data models module for Crimson Nimbus."""

# Stats
from crimsonnimbus.models.stats import STAT_CATALOG, Stat, StatCatalog

# Characters
from crimsonnimbus.models.characters import (
    CharacterStats,
    NewCharacter,
    PlayerCharacter,
    ReferenceCharacter,
)

# Identity
from crimsonnimbus.models.identity import Identity, IdentityProfile

# Outcomes
from crimsonnimbus.models.outcomes import (
    BattleOutcome,
    ImportReport,
    RejectedCharacter,
    RerollResult,
    SortOrder,
    SortSpec,
)

__all__ = [
    # Stats
    "Stat",
    "StatCatalog",
    "STAT_CATALOG",
    # Characters
    "CharacterStats",
    "NewCharacter",
    "PlayerCharacter",
    "ReferenceCharacter",
    # Identity
    "Identity",
    "IdentityProfile",
    # Outcomes
    "BattleOutcome",
    "ImportReport",
    "RejectedCharacter",
    "RerollResult",
    "SortOrder",
    "SortSpec",
]
