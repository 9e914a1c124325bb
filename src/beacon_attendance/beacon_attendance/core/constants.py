"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

DEDUP_WINDOW_SECONDS = 60

SHORT_BREAK_MAX_SECONDS = 5 * 60
LUNCH_BREAK_MIN_SECONDS = 10 * 60

# A day stops being "pending" once local wall-clock time reaches this.
DAY_CLOSE_TIME = time(23, 59, 0)

DEFAULT_QUERY_LIMIT = 100
DEFAULT_EMPLOYEE_HISTORY_LIMIT = 50

ANNOTATION_SEPARATOR = " · "
PENDING = "pending"
