"""
SUNRISE Julian Date Conversion

Converts civil timestamps to Julian dates and back to proleptic Gregorian
calendar dates.

Every conversion resolves the timestamp to UTC first. Naive datetimes are
taken to be UTC.
"""

import math
from datetime import date, datetime, timezone
from typing import Tuple

from sunrise.constants import (
    DAYS_PER_JULIAN_CENTURY,
    J2000_JULIAN_DATE,
    SECONDS_PER_DAY,
    TT_OFFSET_DAYS,
)

__all__ = [
    "julian_date",
    "julian_midnight_date",
    "julian_century",
    "current_julian_day",
    "calendar_date",
    "day_of_year",
    "utc_midnight",
    "to_utc",
]

_J2000_DATE = date(2000, 1, 1)

# Cumulative days before each month in a common year
_DAYS_BEFORE_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def to_utc(date_time: datetime) -> datetime:
    """Resolve a timestamp to UTC, assuming UTC for naive values."""
    if date_time.tzinfo is None:
        return date_time.replace(tzinfo=timezone.utc)
    return date_time.astimezone(timezone.utc)


def utc_midnight(date_time: datetime) -> datetime:
    """Start of the UTC calendar day containing the timestamp."""
    utc = to_utc(date_time)
    return datetime(utc.year, utc.month, utc.day, tzinfo=timezone.utc)


def julian_date(date_time: datetime, include_time: bool = False) -> float:
    """
    Julian date of a civil timestamp.

    Args:
        date_time: Timestamp to convert
        include_time: If False, return the Julian date of the preceding UTC
            midnight; if True, include the fractional time of day

    Returns:
        Julian date (2451545.0 at 2000-01-01T12:00:00 UTC)
    """
    utc = to_utc(date_time)
    days = (utc.date() - _J2000_DATE).days
    if not include_time:
        return J2000_JULIAN_DATE + days - 0.5

    seconds = (
        utc.hour * 3600
        + utc.minute * 60
        + utc.second
        + utc.microsecond / 1_000_000
    )
    return J2000_JULIAN_DATE + days - 0.5 + seconds / SECONDS_PER_DAY


def julian_midnight_date(date_time: datetime) -> float:
    """Julian date of the UTC midnight preceding the timestamp."""
    return julian_date(date_time, include_time=False)


def julian_century(jd: float) -> float:
    """Julian centuries elapsed since J2000.0."""
    return (jd - J2000_JULIAN_DATE) / DAYS_PER_JULIAN_CENTURY


def current_julian_day(date_time: datetime) -> float:
    """Whole days since J2000.0 plus the fixed TT - UT offset."""
    whole_days = int(julian_date(date_time, include_time=True)) - J2000_JULIAN_DATE
    return whole_days + TT_OFFSET_DAYS


def calendar_date(jd: float) -> Tuple[int, int, int]:
    """
    Proleptic Gregorian (year, month, day) of the civil day containing jd.

    Richards' integer algorithm with floor division, so it stays valid for
    negative Julian dates and years before 1.
    """
    j = math.floor(jd + 0.5)
    f = j + 1401 + (((4 * j + 274277) // 146097) * 3) // 4 - 38
    e = 4 * f + 3
    g = (e % 1461) // 4
    h = 5 * g + 2
    day = (h % 153) // 5 + 1
    month = ((h // 153) + 2) % 12 + 1
    year = e // 1461 - 4716 + (12 + 2 - month) // 12
    return year, month, day


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def day_of_year(jd: float) -> int:
    """1-based ordinal day within the Gregorian year for jd."""
    year, month, day = calendar_date(jd)
    doy = _DAYS_BEFORE_MONTH[month - 1] + day
    if month > 2 and _is_leap_year(year):
        doy += 1
    return doy
