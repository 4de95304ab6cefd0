"""Value point scoring for battles."""

from typing import Union

from crimsonnimbus.models.characters import PlayerCharacter, ReferenceCharacter
from crimsonnimbus.models.stats import STAT_CATALOG, StatCatalog

Scoreable = Union[PlayerCharacter, ReferenceCharacter]


class ValuePointCalculator:
    """Converts a character's stats and a win streak into a comparable score."""

    def __init__(self, catalog: StatCatalog = STAT_CATALOG) -> None:
        self._catalog = catalog

    @staticmethod
    def modifier(wins: int) -> int:
        """
        Win streak bonus added to every stat.

        The bonus accumulates 1 + 2 + ... + wins, i.e. the triangular number of
        the streak. A streak of zero (or less) gives no bonus.
        """
        if wins <= 0:
            return 0
        return wins * (wins + 1) // 2

    def breakdown(self, character: Scoreable, wins_at_time_of_scoring: int) -> dict[str, float]:
        """
        Score contribution of each stat.

        Args:
            character: Character to score
            wins_at_time_of_scoring: Streak whose bonus is applied to this side

        Returns:
            Mapping of stat name to its weighted contribution
        """
        bonus = self.modifier(wins_at_time_of_scoring)
        contributions = {}
        for stat in self._catalog:
            value = character.stats.value_of(stat.name) + bonus
            if stat.max_value is not None:
                value = min(value, stat.max_value)
            contributions[stat.name] = value * stat.multiplier
        return contributions

    def score(self, character: Scoreable, wins_at_time_of_scoring: int) -> float:
        """Total value points; not rounded."""
        return sum(self.breakdown(character, wins_at_time_of_scoring).values())
