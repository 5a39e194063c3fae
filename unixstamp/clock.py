"""Timestamp arithmetic.

A ``Clock`` carries the rounding setting and produces timestamps with it:

    >>> clock = Clock(round=True)
    >>> clock.add(123.456, 0)
    123

The module-level functions (``now``, ``add``, ...) use a shared default clock
whose rounding is controlled with ``set_round`` or the ``rounding`` context
manager.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date, datetime
from time import time as current_time

from unixstamp.dates import date_to_timestamp, timestamp_to_date
from unixstamp.offset import to_seconds
from unixstamp.rounding import OutputFilter, filter_for
from unixstamp.util import is_number


class Clock:
    def __init__(self, *, round: bool = False):
        self._output: OutputFilter = filter_for(round)

    @property
    def round(self) -> bool:
        """True if every returned timestamp is rounded to the second."""
        return self._output.rounds

    @round.setter
    def round(self, value: bool) -> None:
        self._output = filter_for(bool(value))

    def __repr__(self) -> str:
        return f"Clock(round={self.round})"

    def _add(self, time: float, offset: str | float) -> float:
        if not is_number(time):
            raise TypeError(
                f"time must be a number (seconds since the Unix epoch).\n"
                f"Got {type(time).__name__!r}: {time!r}\n"
                f"Hint: convert dates first: add(from_date(dt), offset)"
            )
        return time + to_seconds(offset)

    def now(self, offset: str | float | None = None) -> float:
        """Current time as a Unix timestamp, optionally shifted by an offset."""
        now = current_time()
        if offset is not None:
            now = self._add(now, offset)
        return self._output.apply(now)

    def add(self, time: float, offset: str | float) -> float:
        """Apply an offset (string or seconds) to a timestamp.

        Raises:
            TypeError: If time is not a number, or offset is neither a
                string nor a number
            OffsetFormatError: If offset is a malformed offset string
        """
        return self._output.apply(self._add(time, offset))

    def duration(self, offset: str | float) -> float:
        """Length of an offset in seconds (``add`` with a time of zero)."""
        return self.add(0, offset)

    def from_date(self, value: datetime | date | str) -> float:
        return self._output.apply(date_to_timestamp(value))

    def to_date(self, time: float, tz: str = "UTC") -> datetime:
        # Not rounded: this is the reverse conversion
        return timestamp_to_date(time, tz)


_default = Clock()


def default_clock() -> Clock:
    return _default


def get_round() -> bool:
    return _default.round


def set_round(value: bool) -> None:
    """Set whether the module-level functions round timestamps to the second."""
    _default.round = value


@contextmanager
def rounding(enabled: bool = True) -> Iterator[Clock]:
    """Temporarily set rounding on the default clock.

    Example:
        >>> with rounding():
        ...     add(123.456, 0)
        123
    """
    previous = _default.round
    _default.round = enabled
    try:
        yield _default
    finally:
        _default.round = previous


def now(offset: str | float | None = None) -> float:
    """Current time as a Unix timestamp, optionally shifted by an offset.

    Args:
        offset: Offset string (e.g. "-30s") or number of seconds

    Returns:
        The current timestamp, rounded if the default clock rounds
    """
    return _default.now(offset)


def add(time: float, offset: str | float) -> float:
    """Apply an offset to a timestamp.

    Args:
        time: Unix timestamp in seconds
        offset: Offset string such as "-1y 2M 3w 5d 8h 13m 21s 34ms",
            or a number of seconds

    Returns:
        The shifted timestamp

    Raises:
        TypeError: If time is not a number, or offset is neither a string
            nor a number
        OffsetFormatError: If offset is a malformed offset string
    """
    return _default.add(time, offset)


def duration(offset: str | float) -> float:
    """Length of an offset in seconds (alias for ``add(0, offset)``)."""
    return _default.duration(offset)


def from_date(value: datetime | date | str) -> float:
    """Unix timestamp for an aware datetime, a date or an ISO 8601 string."""
    return _default.from_date(value)


def to_date(time: float, tz: str = "UTC") -> datetime:
    """Aware datetime for a Unix timestamp, in the given IANA time zone."""
    return _default.to_date(time, tz)
