"""Arena engine package."""

from crimsonnimbus.engine.arena_config import ArenaConfig, ArenaConfigManager
from crimsonnimbus.engine.battle import BattleResolver
from crimsonnimbus.engine.identities import IdentityRegistry
from crimsonnimbus.engine.reference_import import ReferenceImporter
from crimsonnimbus.engine.reroll import RerollEngine
from crimsonnimbus.engine.roster import CharacterRoster
from crimsonnimbus.engine.sorting import SortSpecResolver
from crimsonnimbus.engine.value_points import ValuePointCalculator

__all__ = [
    "ArenaConfig",
    "ArenaConfigManager",
    "BattleResolver",
    "CharacterRoster",
    "IdentityRegistry",
    "ReferenceImporter",
    "RerollEngine",
    "SortSpecResolver",
    "ValuePointCalculator",
]
