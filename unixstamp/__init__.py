from .clock import (
    Clock,
    add,
    default_clock,
    duration,
    from_date,
    get_round,
    now,
    rounding,
    set_round,
    to_date,
)
from .errors import OffsetFormatError
from .offset import Offset, parse_offset, to_seconds
from .util import DAY, HOUR, MILLISECOND, MINUTE, MONTH, SECOND, WEEK, YEAR

# Capitalised aliases
Millisecond = MILLISECOND
Second = SECOND
Minute = MINUTE
Hour = HOUR
Day = DAY
Week = WEEK
Month = MONTH
Year = YEAR

__all__ = [
    "Clock",
    "Offset",
    "OffsetFormatError",
    "now",
    "add",
    "duration",
    "from_date",
    "to_date",
    "get_round",
    "set_round",
    "rounding",
    "default_clock",
    "parse_offset",
    "to_seconds",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    "Millisecond",
    "Second",
    "Minute",
    "Hour",
    "Day",
    "Week",
    "Month",
    "Year",
]
