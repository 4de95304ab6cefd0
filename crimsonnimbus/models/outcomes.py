"""Result models returned by the arena services."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from crimsonnimbus.models.characters import PlayerCharacter, ReferenceCharacter


class SortOrder(str, Enum):
    """List ordering direction."""

    ASCENDING = "ASC"
    DESCENDING = "DESC"


class SortSpec(BaseModel):
    """Validated ordering instruction for list queries."""

    model_config = ConfigDict(frozen=True)

    field: str
    order: SortOrder = SortOrder.ASCENDING

    @property
    def descending(self) -> bool:
        return self.order is SortOrder.DESCENDING


class RerollResult(BaseModel):
    """Updated character plus the donor it took its new stat from."""

    model_config = ConfigDict(frozen=True)

    character: PlayerCharacter
    donor: ReferenceCharacter
    stat: str = Field(description="Name of the rerolled stat")
    previous_value: int


class BattleOutcome(BaseModel):
    """Result of one battle, reported whether the player won or lost."""

    model_config = ConfigDict(frozen=True)

    won: bool
    player: PlayerCharacter
    player_score: float
    opponent: ReferenceCharacter
    opponent_score: float
    high_score: Optional[int] = Field(
        default=None, description="Owner's high score after a loss, None after a win"
    )


class RejectedCharacter(BaseModel):
    """Import record that failed validation."""

    record: dict[str, Any]
    violations: list[dict[str, str]]


class ImportReport(BaseModel):
    """Summary of a reference set replacement."""

    characters_added: int = Field(ge=0)
    unprocessable_characters: list[RejectedCharacter] = Field(default_factory=list)
