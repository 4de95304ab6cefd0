"""Stat catalog: the recognized stats with their scoring metadata."""

from typing import Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from crimsonnimbus.config import DEFAULT_HEIGHT_CAP, DEFAULT_WEIGHT_CAP
from crimsonnimbus.errors import InvalidArgumentError


class Stat(BaseModel):
    """A single scoreable stat."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(description="Attribute name on a character's stats")
    index: int = Field(ge=1, description="1-based position used by legacy numeric selection")
    multiplier: float = Field(ge=0, description="Weight applied when scoring")
    max_value: Optional[int] = Field(default=None, ge=0, description="Cap applied before scoring")


class StatCatalog:
    """Ordered, read-only collection of stats addressable by name or legacy index."""

    def __init__(self, stats: list[Stat]) -> None:
        self._by_name = {stat.name: stat for stat in stats}
        self._by_index = {stat.index: stat.name for stat in stats}
        if len(self._by_name) != len(stats) or len(self._by_index) != len(stats):
            raise ValueError("Stat names and indexes must be unique")
        self._ordered = tuple(sorted(stats, key=lambda s: s.index))

    def __iter__(self) -> Iterator[Stat]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    @property
    def names(self) -> list[str]:
        return [stat.name for stat in self._ordered]

    def get(self, name: str) -> Stat:
        """Get stat by name."""
        try:
            return self._by_name[name]
        except KeyError:
            raise InvalidArgumentError(f"Unknown stat: {name}") from None

    def by_index(self, index: int) -> Stat:
        """Get stat by its legacy 1-based index."""
        if index not in self._by_index:
            raise InvalidArgumentError(
                f"Stat index must be provided and be a number between 1 and {len(self)}"
            )
        return self._by_name[self._by_index[index]]

    def resolve(self, selector: Union[int, str, None]) -> Stat:
        """
        Resolve a client-supplied stat selector.

        Args:
            selector: Legacy numeric index (int or digit string) or a stat name

        Returns:
            The matching Stat

        Raises:
            InvalidArgumentError: selector is missing or unknown
        """
        if isinstance(selector, bool) or selector is None:
            raise InvalidArgumentError(
                f"Stat index must be provided and be a number between 1 and {len(self)}"
            )
        if isinstance(selector, int):
            return self.by_index(selector)
        text = str(selector).strip()
        if text.isdecimal():
            return self.by_index(int(text))
        return self.get(text.lower())


STAT_CATALOG = StatCatalog(
    [
        Stat(name="height", index=1, multiplier=0.2, max_value=DEFAULT_HEIGHT_CAP),
        Stat(name="weight", index=2, multiplier=0.3, max_value=DEFAULT_WEIGHT_CAP),
        Stat(name="intelligence", index=3, multiplier=0.8),
        Stat(name="strength", index=4, multiplier=1.1),
        Stat(name="speed", index=5, multiplier=1.0),
        Stat(name="durability", index=6, multiplier=0.8),
        Stat(name="combat", index=7, multiplier=1.2),
        Stat(name="power", index=8, multiplier=1.1),
    ]
)
