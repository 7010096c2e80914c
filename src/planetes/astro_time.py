"""
Time conversion for orbital element evaluation.

Every orbital calculation in the package is a function of a single day-count
``d``: days, with fraction, since 2000 January 0.0 UT (1999-12-31T00:00:00Z),
the reference instant of the orbital element coefficients. Instants are
carried as integer nanoseconds since the Unix epoch until the final division,
so nanosecond input resolution survives into the day-count.

Julian Date conversions are provided alongside, for callers who work in JD.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Callable, Union

import numpy as np

from .errors import ClockUnavailable

logger = logging.getLogger(__name__)

# ========== CONSTANTS ==========
SECONDS_PER_DAY = 86400
NANOSECONDS_PER_SECOND = 10**9
NANOSECONDS_PER_DAY = SECONDS_PER_DAY * NANOSECONDS_PER_SECOND
UNIX_EPOCH_JD = 2440587.5           # Julian Date of 1970-01-01T00:00:00Z
EPOCH_UNIX_SECONDS = 946598400      # 1999-12-31T00:00:00Z, i.e. 2000 Jan 0.0 UT
EPOCH_UNIX_NS = EPOCH_UNIX_SECONDS * NANOSECONDS_PER_SECOND
DAY_COUNT_EPOCH_JD = UNIX_EPOCH_JD + EPOCH_UNIX_SECONDS / SECONDS_PER_DAY  # 2451543.5

# nanoseconds per datetime64 unit; calendar units Y and M are first cast to days
_NANOSECONDS_PER_UNIT = {
    'W': 7 * NANOSECONDS_PER_DAY,
    'D': NANOSECONDS_PER_DAY,
    'h': 3600 * NANOSECONDS_PER_SECOND,
    'm': 60 * NANOSECONDS_PER_SECOND,
    's': NANOSECONDS_PER_SECOND,
    'ms': 10**6,
    'us': 10**3,
    'ns': 1,
}
# sub-nanosecond units, as divisors
_UNITS_PER_NANOSECOND = {'ps': 10**3, 'fs': 10**6, 'as': 10**9}

Instant = Union[datetime, np.datetime64, int, float]


# ========== DAY-COUNT AND JULIAN DATE ==========
def day_count_from_unix_ns(ns: int) -> float:
    """
    Days since 1999-12-31T00:00:00Z for an instant in Unix nanoseconds.

    The epoch offset is removed in integer arithmetic before converting to
    days, so no precision is lost to the large Unix offset.
    """
    return (int(ns) - EPOCH_UNIX_NS) / NANOSECONDS_PER_DAY


def julian_date_from_unix_ns(ns: int) -> float:
    """Julian Date for an instant in Unix nanoseconds."""
    return int(ns) / NANOSECONDS_PER_DAY + UNIX_EPOCH_JD


def julian_date_to_day_count(jd: float) -> float:
    """Convert a Julian Date to days since 1999-12-31T00:00:00Z."""
    return jd - DAY_COUNT_EPOCH_JD


def day_count_to_julian_date(d: float) -> float:
    """Convert days since 1999-12-31T00:00:00Z to a Julian Date."""
    return d + DAY_COUNT_EPOCH_JD


# ========== INSTANT CONVERSION ==========
def to_unix_ns(instant) -> int:
    """
    Convert an instant to integer nanoseconds since the Unix epoch.

    Parameters
    ----------
    instant : datetime, numpy.datetime64 or int
        Naive datetimes are taken as UTC. datetime64 values of any unit are
        converted to nanoseconds. Integers are taken as nanoseconds already.

    Returns
    -------
    int
        Nanoseconds since 1970-01-01T00:00:00Z

    Raises
    ------
    TypeError
        If the instant is of an unsupported type
    ValueError
        If a datetime64 is NaT
    """
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        delta = instant - datetime(1970, 1, 1, tzinfo=timezone.utc)
        # timedelta holds exact days/seconds/microseconds; avoid float seconds
        return ((delta.days * SECONDS_PER_DAY + delta.seconds) * NANOSECONDS_PER_SECOND
                + delta.microseconds * 1000)
    if isinstance(instant, np.datetime64):
        if np.isnat(instant):
            raise ValueError("Instant is NaT")
        return _datetime64_to_unix_ns(instant)
    if isinstance(instant, (int, np.integer)) and not isinstance(instant, bool):
        return int(instant)
    raise TypeError(f"Instant must be datetime, numpy.datetime64 or int nanoseconds, "
                    f"got {type(instant)}")


def _datetime64_to_unix_ns(instant: np.datetime64) -> int:
    # scale in Python integers; casting to datetime64[ns] wraps outside ~1678-2262
    unit, count = np.datetime_data(instant.dtype)
    if unit in ('Y', 'M'):
        instant = instant.astype('datetime64[D]')
        unit, count = 'D', 1
    value = int(instant.astype(np.int64)) * count
    if unit in _NANOSECONDS_PER_UNIT:
        return value * _NANOSECONDS_PER_UNIT[unit]
    if unit in _UNITS_PER_NANOSECOND:
        return value // _UNITS_PER_NANOSECOND[unit]
    raise ValueError(f"Unsupported datetime64 unit '{unit}'")


def day_count(instant: Instant) -> float:
    """
    Day-count used as the time variable for every orbital calculation.

    Parameters
    ----------
    instant : datetime, numpy.datetime64, int or float
        datetime and datetime64 instants are converted; plain numbers are
        taken to already be a day-count and returned as float.

    Returns
    -------
    float
        Days since 1999-12-31T00:00:00Z (negative before that epoch)

    Notes
    -----
    The epoch is 2000 January 0.0 UT, one day before 2000-01-01T00:00:00Z,
    so ``day_count(datetime(2000, 1, 1, tzinfo=timezone.utc))`` is 1.0.
    """
    if isinstance(instant, (datetime, np.datetime64)):
        return day_count_from_unix_ns(to_unix_ns(instant))
    if isinstance(instant, (int, float, np.integer, np.floating)) and not isinstance(instant, bool):
        d = float(instant)
        if not np.isfinite(d):
            raise ValueError(f"Day-count must be finite, got {d}")
        return d
    raise TypeError(f"Instant must be datetime, numpy.datetime64 or a day-count, "
                    f"got {type(instant)}")


# ========== CLOCK SOURCE ==========
def now_ns(clock: Callable[[], int] = time.time_ns) -> int:
    """
    Read the current instant from a clock source.

    Parameters
    ----------
    clock : callable, optional
        Zero-argument callable returning integer nanoseconds since the
        Unix epoch. Default: time.time_ns

    Returns
    -------
    int
        Nanoseconds since 1970-01-01T00:00:00Z

    Raises
    ------
    ClockUnavailable
        If the clock raises, returns a non-integer, or reports a time
        before the Unix epoch
    """
    try:
        ns = clock()
    except Exception as exc:
        raise ClockUnavailable(f"Clock source failed: {exc}") from exc
    if isinstance(ns, bool) or not isinstance(ns, (int, np.integer)):
        raise ClockUnavailable(f"Clock source must return integer nanoseconds, "
                               f"got {type(ns)}")
    if ns < 0:
        raise ClockUnavailable(f"Clock reports a time before the Unix epoch: {ns} ns")
    logger.debug("Clock read %d ns", ns)
    return int(ns)


def current_day_count(clock: Callable[[], int] = time.time_ns) -> float:
    """Day-count of the current instant, see now_ns()."""
    return day_count_from_unix_ns(now_ns(clock))


def current_julian_date(clock: Callable[[], int] = time.time_ns) -> float:
    """Julian Date of the current instant, see now_ns()."""
    return julian_date_from_unix_ns(now_ns(clock))


def parse_instant(text: str) -> datetime:
    """
    Parse an ISO-8601 timestamp into an aware UTC datetime.

    A trailing 'Z' is accepted, and timestamps without an offset are taken
    as UTC.

    Raises
    ------
    ValueError
        If the text is not a valid ISO-8601 timestamp
    """
    text = text.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
