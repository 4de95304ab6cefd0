"""Smoke tests for arena configuration."""

from crimsonnimbus.config import (
    DEFAULT_CHARACTER_SORT_FIELDS,
    DEFAULT_HEIGHT_CAP,
    DEFAULT_NEW_ROLL_SIZE,
    DEFAULT_WEIGHT_CAP,
    DESCENDING_OPTIONS,
)
from crimsonnimbus.engine.arena_config import ArenaConfig, ArenaConfigManager


class TestConfigSmoke:
    """Smoke tests to validate configuration defaults."""

    def test_config_imports_successfully(self):
        """Test that all config constants can be imported without errors."""
        assert DEFAULT_NEW_ROLL_SIZE == 8
        assert DEFAULT_HEIGHT_CAP > 0
        assert DEFAULT_WEIGHT_CAP > 0
        assert DEFAULT_CHARACTER_SORT_FIELDS[0] == "id"
        assert set(DESCENDING_OPTIONS) == {"DESC", "DESCENDING", "D"}


class TestArenaConfig:
    """Test suite for ArenaConfig."""

    def test_arena_config_defaults(self):
        """Test ArenaConfig with defaults."""
        config = ArenaConfig()
        assert config.new_roll_size == DEFAULT_NEW_ROLL_SIZE
        assert config.character_sort_fields == DEFAULT_CHARACTER_SORT_FIELDS

    def test_default_sort_fields_not_shared(self):
        """Test that each config owns its sort field list."""
        first = ArenaConfig()
        first.character_sort_fields.append("name")
        assert "name" not in ArenaConfig().character_sort_fields

    def test_arena_config_manager_update(self):
        """Test updating ArenaConfigManager."""
        manager = ArenaConfigManager()
        manager.update_config(ArenaConfig(admin_user_id="1", new_roll_size=3))
        assert manager.config.admin_user_id == "1"
        assert manager.config.new_roll_size == 3
