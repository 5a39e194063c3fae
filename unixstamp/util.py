"""Time unit constants for unixstamp.

All values are durations in seconds. Months and years use the mean
Gregorian month, so adding a month never lands on the same day-of-month.
"""

# Time unit constants (all values in seconds)
MILLISECOND = 0.001
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
# mean Gregorian month
MONTH = 30.436875 * DAY
YEAR = 12 * MONTH

# Offset unit tokens in the order they must appear in an offset string
UNITS: dict[str, float] = {
    "y": YEAR,
    "M": MONTH,
    "w": WEEK,
    "d": DAY,
    "h": HOUR,
    "m": MINUTE,
    "s": SECOND,
    "ms": MILLISECOND,
}


def is_number(value: object) -> bool:
    """True for ints and floats, but not bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
