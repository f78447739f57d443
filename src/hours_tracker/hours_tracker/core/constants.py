"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

DEFAULT_SESSION_DAYS = 7
DEFAULT_HOURLY_RATE = 9.0
DEFAULT_NUMBER_LOCALE = "sl-SI"
MIN_PASSWORD_LENGTH = 6

BACKUP_VERSION = 1

CSV_DELIMITER = ";"
CSV_HEADER = ("Date", "Hours", "Comment", "Amount")
CSV_TOTAL_LABEL = "Total"
