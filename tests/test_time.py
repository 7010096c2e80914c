"""
Test suite for time conversion and the clock source.

Tests include:
1. Day-count of datetime, datetime64 and numeric instants
2. Nanosecond resolution
3. Julian Date conversions
4. Clock failures
5. ISO-8601 parsing
"""

from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from planetes import ClockUnavailable
from planetes.astro_time import (
    EPOCH_UNIX_NS, NANOSECONDS_PER_DAY, DAY_COUNT_EPOCH_JD,
    current_day_count, current_julian_date, day_count, day_count_from_unix_ns,
    day_count_to_julian_date, julian_date_from_unix_ns, julian_date_to_day_count,
    now_ns, parse_instant, to_unix_ns,
)


UTC = timezone.utc


# =============================================================================
# Day-Count
# =============================================================================

class TestDayCount:
    """Test conversion of instants to the day-count."""

    def test_epoch_is_zero(self):
        """1999-12-31T00:00:00Z is day-count 0."""
        assert day_count(datetime(1999, 12, 31, tzinfo=UTC)) == 0.0

    def test_j2000_noon(self):
        """2000-01-01T12:00:00Z is day-count 1.5."""
        assert day_count(datetime(2000, 1, 1, 12, tzinfo=UTC)) == 1.5

    def test_naive_datetime_is_utc(self):
        assert day_count(datetime(2000, 1, 1, 12)) == 1.5

    def test_offset_datetime(self):
        """Aware datetimes in other zones convert to UTC first."""
        tz = timezone(timedelta(hours=2))
        assert day_count(datetime(2000, 1, 1, 2, tzinfo=tz)) == 1.0

    def test_before_epoch_is_negative(self):
        assert day_count(datetime(1999, 12, 30, 12, tzinfo=UTC)) == -0.5

    def test_datetime64(self):
        assert day_count(np.datetime64('2000-01-01T12:00:00')) == 1.5

    def test_datetime64_day_unit(self):
        assert day_count(np.datetime64('2000-01-10')) == 10.0

    def test_datetime64_nanosecond_resolution(self):
        """A single nanosecond after the epoch survives the conversion."""
        d = day_count(np.datetime64('1999-12-31T00:00:00.000000001'))
        assert d == pytest.approx(1 / NANOSECONDS_PER_DAY, rel=1e-9)
        assert d > 0

    def test_nanosecond_resolution_far_from_epoch(self):
        """Integer arithmetic keeps nanoseconds distinct decades later."""
        base = EPOCH_UNIX_NS + 25 * 365 * NANOSECONDS_PER_DAY
        assert day_count_from_unix_ns(base + 1000) > day_count_from_unix_ns(base)

    def test_numbers_are_day_counts(self):
        assert day_count(5) == 5.0
        assert day_count(-12.25) == -12.25
        assert isinstance(day_count(np.int64(3)), float)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            day_count(True)

    def test_string_rejected(self):
        with pytest.raises(TypeError):
            day_count("2000-01-01")

    @pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValueError, match="finite"):
            day_count(value)

    def test_nat_rejected(self):
        with pytest.raises(ValueError, match="NaT"):
            day_count(np.datetime64('NaT'))


    def test_calendar_day_one_is_day_count_one(self):
        """2000-01-01T00:00:00Z is one day after the epoch."""
        assert day_count(datetime(2000, 1, 1, tzinfo=UTC)) == 1.0


class TestDatetime64Range:
    """datetime64 instants outside the datetime64[ns] range convert exactly."""

    @pytest.mark.parametrize("text,dt", [
        ('1600-01-01', datetime(1600, 1, 1, tzinfo=UTC)),
        ('2300-01-01', datetime(2300, 1, 1, tzinfo=UTC)),
        ('1000-06-15T12:00:00', datetime(1000, 6, 15, 12, tzinfo=UTC)),
        ('2999-12-31T23:59:59', datetime(2999, 12, 31, 23, 59, 59, tzinfo=UTC)),
    ])
    def test_matches_datetime(self, text, dt):
        assert day_count(np.datetime64(text)) == day_count(dt)

    def test_far_dates_have_expected_sign(self):
        assert day_count(np.datetime64('1600-01-01')) == -146096.0
        assert day_count(np.datetime64('2300-01-01')) == 109574.0

    def test_year_and_month_units(self):
        assert day_count(np.datetime64('2300', 'Y')) == day_count(datetime(2300, 1, 1, tzinfo=UTC))
        assert day_count(np.datetime64('1650-03', 'M')) == day_count(datetime(1650, 3, 1, tzinfo=UTC))

    def test_multiple_of_unit(self):
        """Units such as datetime64[10D] scale by their count."""
        instant = np.datetime64(3, '10D')
        assert to_unix_ns(instant) == 30 * NANOSECONDS_PER_DAY

    def test_microsecond_unit_far_future(self):
        instant = np.datetime64('2500-01-01T00:00:00.000001')
        expected = to_unix_ns(datetime(2500, 1, 1, tzinfo=UTC)) + 1000
        assert to_unix_ns(instant) == expected

    def test_sub_nanosecond_unit(self):
        assert to_unix_ns(np.datetime64(1500, 'ps')) == 1


class TestToUnixNs:
    """Test conversion to integer Unix nanoseconds."""

    def test_unix_epoch(self):
        assert to_unix_ns(datetime(1970, 1, 1, tzinfo=UTC)) == 0

    def test_microseconds_exact(self):
        dt = datetime(2024, 3, 20, 3, 6, 0, 123456, tzinfo=UTC)
        assert to_unix_ns(dt) % 10**9 == 123456000

    def test_integer_passthrough(self):
        assert to_unix_ns(EPOCH_UNIX_NS) == EPOCH_UNIX_NS

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            to_unix_ns(1.5)


# =============================================================================
# Julian Date
# =============================================================================

class TestJulianDate:
    """Test Julian Date conversions."""

    def test_epoch_jd(self):
        assert DAY_COUNT_EPOCH_JD == 2451543.5
        assert day_count_to_julian_date(0.0) == 2451543.5

    def test_j2000(self):
        """JD 2451545.0 is 2000-01-01T12:00:00Z, day-count 1.5."""
        assert julian_date_to_day_count(2451545.0) == 1.5

    def test_unix_epoch_jd(self):
        assert julian_date_from_unix_ns(0) == 2440587.5

    def test_consistent_with_day_count(self):
        ns = to_unix_ns(datetime(2024, 3, 20, 3, 6, tzinfo=UTC))
        jd = julian_date_from_unix_ns(ns)
        assert julian_date_to_day_count(jd) == pytest.approx(day_count_from_unix_ns(ns), abs=1e-8)


# =============================================================================
# Clock Source
# =============================================================================

class TestClock:
    """Test reading the current instant from a clock source."""

    def test_clock_value_returned(self):
        assert now_ns(lambda: 12345) == 12345

    def test_current_day_count(self):
        assert current_day_count(lambda: EPOCH_UNIX_NS) == 0.0

    def test_current_julian_date(self):
        assert current_julian_date(lambda: EPOCH_UNIX_NS) == pytest.approx(2451543.5)

    def test_default_clock_is_after_epoch(self):
        assert current_day_count() > 8000.0

    def test_failing_clock(self):
        def broken():
            raise OSError("clock_gettime failed")

        with pytest.raises(ClockUnavailable, match="clock_gettime"):
            now_ns(broken)

    @pytest.mark.parametrize("value", [1.5, "now", None, True])
    def test_non_integer_clock(self, value):
        with pytest.raises(ClockUnavailable):
            now_ns(lambda: value)

    @pytest.mark.parametrize("error", [RuntimeError("driver gone"), ValueError("bad read")])
    def test_any_clock_exception_wrapped(self, error):
        def clock():
            raise error

        with pytest.raises(ClockUnavailable) as excinfo:
            now_ns(clock)
        assert excinfo.value.__cause__ is error

    def test_negative_clock(self):
        with pytest.raises(ClockUnavailable, match="before the Unix epoch"):
            now_ns(lambda: -1)


# =============================================================================
# ISO-8601 Parsing
# =============================================================================

class TestParseInstant:
    """Test parsing of command line timestamps."""

    def test_zulu_suffix(self):
        assert parse_instant("2024-03-20T03:06:00Z") == datetime(2024, 3, 20, 3, 6, tzinfo=UTC)

    def test_naive_is_utc(self):
        parsed = parse_instant("2000-01-01T12:00:00")
        assert parsed.tzinfo is not None
        assert day_count(parsed) == 1.5

    def test_offset_converted_to_utc(self):
        parsed = parse_instant("2000-01-01T14:00:00+02:00")
        assert parsed.utcoffset() == timedelta(0)
        assert parsed.hour == 12

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_instant("not a date")
