"""Utility constants for calcalc.

Time unit constants represent durations in seconds. Months and years have
no fixed length, so distances only estimate them from a whole number of
days.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Rough day counts used for Distance.months and Distance.years
APPROX_DAYS_PER_MONTH = 30
APPROX_DAYS_PER_YEAR = 365

TIMESTAMP_PATTERN = "YYYY-MM-DD HH:MM:SS"
