"""Conversions between Unix timestamps and calendar dates.

These helpers return raw timestamps; rounding is applied by the ``Clock``
that calls them.
"""

from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

from dateutil.parser import isoparse

from unixstamp.util import is_number


def date_to_timestamp(value: datetime | date | str) -> float:
    """Convert a date, an aware datetime or an ISO 8601 string to epoch seconds.

    Accepts:
    - str: ISO 8601 date or date-time; without a UTC offset it is read as UTC
    - datetime: Must be timezone-aware
    - date: Midnight UTC of that day

    Raises:
        TypeError: If value is an unsupported type or a naive datetime
        ValueError: If the string is not valid ISO 8601 (from dateutil)
    """
    if isinstance(value, str):
        parsed = isoparse(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed.timestamp()
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"Expected a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))  "
                f"# or 'US/Pacific', etc.\n"
                f"  # Or use timezone.utc for UTC:\n"
                f"  dt = datetime(..., tzinfo=timezone.utc)"
            )
        return value.timestamp()
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc).timestamp()
    raise TypeError(
        f"Expected a string or a date.\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Examples:\n"
        f"  from_date('2014-02-15T00:00:00Z')  # ISO 8601 string\n"
        f"  from_date(datetime(2014, 2, 15, tzinfo=timezone.utc))\n"
        f"  from_date(date(2014, 2, 15))"
    )


def timestamp_to_date(value: float, tz: str = "UTC") -> datetime:
    """Convert epoch seconds to an aware datetime in the given IANA zone."""
    if not is_number(value):
        raise TypeError(
            f"Expected a number of seconds since the Unix epoch.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: use from_date() to go from a date to a timestamp"
        )
    return datetime.fromtimestamp(value, tz=ZoneInfo(tz))
