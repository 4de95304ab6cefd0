"""Arena runtime configuration."""

from typing import Optional

from pydantic import BaseModel, Field

from crimsonnimbus.config import (
    DEFAULT_ADMIN_USER_ID,
    DEFAULT_CHARACTER_SORT_FIELDS,
    DEFAULT_NEW_ROLL_SIZE,
)


class ArenaConfig(BaseModel):
    """Arena configuration."""

    admin_user_id: str = Field(
        default=DEFAULT_ADMIN_USER_ID, description="Identity allowed to replace the reference set"
    )
    new_roll_size: int = Field(
        default=DEFAULT_NEW_ROLL_SIZE, ge=1, description="Reference characters offered on a new roll"
    )
    character_sort_fields: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CHARACTER_SORT_FIELDS),
        min_length=1,
        description="Sortable character list fields; the first is the default",
    )


class ArenaConfigManager:
    """Manages arena configuration."""

    def __init__(self, initial_config: Optional[ArenaConfig] = None) -> None:
        """Initialize with optional config."""
        self._config = initial_config or ArenaConfig()

    @property
    def config(self) -> ArenaConfig:
        """Get current config."""
        return self._config

    def update_config(self, new_config: ArenaConfig) -> None:
        """Update configuration."""
        self._config = new_config
