"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Events are scheduled in Colombia wall-clock time (UTC-5, no daylight saving).
REFERENCE_UTC_OFFSET_HOURS = -5

DEFAULT_EVENTS_LIMIT = 50
DEFAULT_SESSION_DAYS = 7

DEFAULT_CSV_DELIMITER = ","
UTF8_BOM = "\ufeff"
GROUP_HEADER_SEPARATOR = " | "
UNGROUPED_KEY = "__sin_evento__"
