"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_LATE_THRESHOLD_MINUTES = 5
DEFAULT_TRAILING_WINDOW_DAYS = 30
DEFAULT_MAX_PHOTO_BYTES = 2 * 1024 * 1024
DEFAULT_API_TIMEOUT = 20
DEFAULT_LAVEL = 1

NO_DEPARTMENT_ID = "no-department"
NO_DEPARTMENT_NAME = "Bo'limi yo'q"
ALL = "all"

EMPTY_TIME = "--:--"
EMPTY_VALUE = "—"
NO_LOGS_COMMENT = "Log mavjud emas"
