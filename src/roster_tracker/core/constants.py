"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOP_ATTENDERS = 5
DEFAULT_INSIGHTS_DAYS = 7
DEFAULT_IMPORT_GENDER = "male"
EXPORT_FILENAME = "members.csv"
CSV_TRUE = "true"
CSV_FALSE = "false"
