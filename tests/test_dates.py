"""Tests for conversions between timestamps and dates."""

from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from unixstamp import Clock, from_date, now, rounding, to_date

ERROR_MARGIN = 0.01

# 2014-02-15T00:00:00Z
FEB_15_2014 = 1392422400


def test_from_date_aware_datetime():
    """Test converting a timezone-aware datetime."""
    assert from_date(datetime.now(timezone.utc)) == pytest.approx(
        now(), abs=ERROR_MARGIN
    )
    assert from_date(datetime(2014, 2, 15, tzinfo=timezone.utc)) == FEB_15_2014


def test_from_date_string():
    """Test converting an ISO 8601 string in UTC."""
    assert from_date("2014-02-15T00:00:00Z") == pytest.approx(
        FEB_15_2014, abs=ERROR_MARGIN
    )


def test_from_date_string_with_utc_offset():
    """Test that ISO strings honour their UTC offset."""
    assert from_date("2014-02-15T01:00:00+01:00") == FEB_15_2014


def test_from_date_string_without_offset_is_utc():
    """Test that ISO strings without an offset are read as UTC."""
    assert from_date("2014-02-15") == FEB_15_2014
    assert from_date("2014-02-15T00:00:30") == FEB_15_2014 + 30


def test_from_date_keeps_sub_second_precision():
    """Test that fractional seconds in ISO strings are kept."""
    assert from_date("2014-02-15T00:00:00.25Z") == FEB_15_2014 + 0.25


def test_from_date_plain_date_is_midnight_utc():
    """Test that a date converts to midnight UTC."""
    assert from_date(date(2014, 2, 15)) == FEB_15_2014


def test_from_date_rounds_when_configured():
    """Test that from_date() rounds when rounding is on."""
    with rounding():
        result = from_date("2014-02-15T00:00:00.75Z")

    assert result == FEB_15_2014 + 1
    assert isinstance(result, int)


def test_from_date_rejects_naive_datetime():
    """Test that naive datetimes are rejected."""
    with pytest.raises(TypeError, match="timezone-aware"):
        from_date(datetime(2014, 2, 15))


def test_from_date_rejects_other_types():
    """Test that from_date() rejects non-date values."""
    with pytest.raises(TypeError, match="string or a date"):
        from_date(42)  # type: ignore[arg-type]


def test_from_date_propagates_parse_failure():
    """Test that unparseable strings raise ValueError."""
    with pytest.raises(ValueError):
        from_date("not a date")


def test_to_date_returns_utc_datetime():
    """Test that to_date() returns an aware UTC datetime."""
    result = to_date(FEB_15_2014)

    assert result == datetime(2014, 2, 15, tzinfo=timezone.utc)
    assert result.tzinfo is not None


def test_to_date_in_time_zone():
    """Test converting a timestamp into another time zone."""
    result = to_date(FEB_15_2014, tz="US/Pacific")

    assert result.tzinfo == ZoneInfo("US/Pacific")
    assert (result.day, result.hour) == (14, 16)


def test_to_date_is_not_rounded():
    """Test that to_date() ignores the rounding setting."""
    clock = Clock(round=True)

    assert clock.to_date(FEB_15_2014 + 0.5).microsecond == 500000


def test_to_date_rejects_non_numbers():
    """Test that to_date() requires a number."""
    with pytest.raises(TypeError, match="number"):
        to_date(datetime.now(timezone.utc))  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="number"):
        to_date("1392422400")  # type: ignore[arg-type]


def test_round_trip_timestamp():
    """Test timestamp -> date -> timestamp."""
    t = 1392422400.123456

    assert from_date(to_date(t)) == pytest.approx(t, abs=ERROR_MARGIN)


def test_round_trip_date():
    """Test date -> timestamp -> date."""
    dt = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)

    assert to_date(from_date(dt)) == dt


def test_round_trip_negative_timestamp():
    """Test round trips before the epoch."""
    t = -86400.5

    assert to_date(t) == datetime(1969, 12, 30, 23, 59, 59, 500000, tzinfo=timezone.utc)
    assert from_date(to_date(t)) == t
