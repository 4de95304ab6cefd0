"""Character models: reference templates and player-owned characters."""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

from crimsonnimbus.config import NAME_MAX_LENGTH, NAME_MIN_LENGTH, STAT_MAX, STAT_MIN


class CharacterStats(BaseModel):
    """The eight scoreable stats shared by every character."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    height: int = Field(ge=0, description="Height (uncapped)")
    weight: int = Field(ge=0, description="Weight (uncapped)")
    intelligence: int = Field(ge=STAT_MIN, le=STAT_MAX, description="Intelligence stat")
    strength: int = Field(ge=STAT_MIN, le=STAT_MAX, description="Strength stat")
    speed: int = Field(ge=STAT_MIN, le=STAT_MAX, description="Speed stat")
    durability: int = Field(ge=STAT_MIN, le=STAT_MAX, description="Durability stat")
    combat: int = Field(ge=STAT_MIN, le=STAT_MAX, description="Combat stat")
    power: int = Field(ge=STAT_MIN, le=STAT_MAX, description="Power stat")

    def value_of(self, stat_name: str) -> int:
        """Get a stat value by name."""
        return getattr(self, stat_name)

    def with_value(self, stat_name: str, value: int) -> "CharacterStats":
        """Return a validated copy with one stat replaced."""
        data = self.model_dump()
        data[stat_name] = value
        return CharacterStats.model_validate(data)


def _fold_flat_stats(data: Any) -> Any:
    """Accept records that list stats at top level instead of under ``stats``."""
    if not isinstance(data, dict) or "stats" in data:
        return data
    stat_names = CharacterStats.model_fields.keys()
    if not any(name in data for name in stat_names):
        return data
    folded = {k: v for k, v in data.items() if k not in stat_names}
    folded["stats"] = {k: v for k, v in data.items() if k in stat_names}
    return folded


class ReferenceCharacter(BaseModel):
    """Administrator-imported template used as opponent and reroll donor."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0, description="Reference character identifier")
    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    stats: CharacterStats
    image_prefix: str = Field(
        min_length=1, validation_alias=AliasChoices("image_prefix", "imagePrefix"), description="Image URL prefix"
    )
    image_suffix: str = Field(
        min_length=1, validation_alias=AliasChoices("image_suffix", "imageSuffix"), description="Image URL suffix"
    )

    @model_validator(mode="before")
    @classmethod
    def fold_flat_stats(cls, data: Any) -> Any:
        return _fold_flat_stats(data)


class NewCharacter(BaseModel):
    """Client payload for designing a new character."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    stats: CharacterStats
    url: Optional[str] = Field(default=None, min_length=1, description="Image URL")

    @model_validator(mode="before")
    @classmethod
    def fold_flat_stats(cls, data: Any) -> Any:
        return _fold_flat_stats(data)


class PlayerCharacter(BaseModel):
    """A user-owned character with its current win streak."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=0, description="Store generated identifier")
    name: str = Field(min_length=NAME_MIN_LENGTH, max_length=NAME_MAX_LENGTH)
    stats: CharacterStats
    url: Optional[str] = Field(default=None, description="Image URL")
    wins: int = Field(ge=0, default=0, description="Consecutive battles won")
    is_active: bool = Field(default=True, description="False once the character has lost")
    owner_id: str = Field(description="Owning identity id, never changes")
    version: int = Field(ge=0, default=0, description="Optimistic concurrency token")
