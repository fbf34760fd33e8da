"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TIMELINE_PAD_DAYS = 2
UNKNOWN_LABEL = "Unknown"

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

WEEK_LABEL_FORMAT = "Week of %b %d"
MONTH_LABEL_FORMAT = "%b %Y"

DEFAULT_SHEET_NAME = "Sheet1"
ALL_PROJECTS = "all"
