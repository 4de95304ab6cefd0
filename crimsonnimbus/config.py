"""Central configuration defaults and constants for Crimson Nimbus."""

import os

# Administration
DEFAULT_ADMIN_USER_ID = os.getenv("CRIMSONNIMBUS_ADMIN_USER_ID", "")

# Logging
DEFAULT_LOG_LEVEL = os.getenv("CRIMSONNIMBUS_LOG_LEVEL", "INFO")
DEFAULT_LOG_FORMAT = "[%(name)-19s - %(levelname)5s] %(message)s"

# Character creation offers one reference character per stat
DEFAULT_NEW_ROLL_SIZE = int(os.getenv("CRIMSONNIMBUS_NEW_ROLL_SIZE", "8"))

# Stat caps applied before scoring (only height and weight are capped)
DEFAULT_HEIGHT_CAP = int(os.getenv("CRIMSONNIMBUS_HEIGHT_CAP", "300"))
DEFAULT_WEIGHT_CAP = int(os.getenv("CRIMSONNIMBUS_WEIGHT_CAP", "400"))

# Sorting - first field is the default ordering
_sort_fields_env = os.getenv("CRIMSONNIMBUS_CHARACTER_SORT_FIELDS")
DEFAULT_CHARACTER_SORT_FIELDS = (
    [f.strip() for f in _sort_fields_env.split(",") if f.strip()] if _sort_fields_env
    else ["id", "creator", "creator.userName"]
)
DESCENDING_OPTIONS = ("DESC", "DESCENDING", "D")

# Entity limits
NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 64
STAT_MIN = 0
STAT_MAX = 100
