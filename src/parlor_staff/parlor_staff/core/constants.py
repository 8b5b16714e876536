"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_DAY = 1440

DEFAULT_NIGHT_WINDOW_START = "22:00"
DEFAULT_NIGHT_WINDOW_END = "05:00"

# Quick-entry advance payments move in these steps.
DEFAULT_ADVANCE_STEP = 10000

SPECIAL_WAGE_LABEL_MAX = 50
SPECIAL_WAGE_MIN = 0
SPECIAL_WAGE_MAX = 100000

MAX_PLACE_YONMA = 4
MAX_PLACE_SANMA = 3

DEFAULT_RESULT_LIMIT = 500
DEFAULT_RANKING_LIMIT = 100

# Opening/closing instants per shift type, used for actual staffing counts.
DEFAULT_SHIFT_TYPE_WINDOWS = {
    "EARLY": ("11:00", "18:00"),
    "LATE": ("18:00", "05:00"),
}
