"""
SUNRISE Unit Tests - Julian Dates

Unit tests for sunrise/julian.py.

Run:
    pytest tests/unit/test_julian.py -v
"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from sunrise.constants import TT_OFFSET_DAYS
from sunrise.julian import (
    calendar_date,
    current_julian_day,
    day_of_year,
    julian_century,
    julian_date,
    julian_midnight_date,
    utc_midnight,
)

LONDON = ZoneInfo("Europe/London")
CHICAGO = ZoneInfo("America/Chicago")


# =============================================================================
# julian_date
# =============================================================================

class TestJulianDate:
    """Tests for timestamp to Julian date conversion."""

    @pytest.mark.parametrize("when, expected", [
        (datetime(2000, 1, 1, 12, 0, tzinfo=LONDON), 2451545.0),
        (datetime(2000, 1, 2, 0, 0, tzinfo=LONDON), 2451545.5),
        (datetime(2000, 1, 2, 12, 0, tzinfo=LONDON), 2451546.0),
        (datetime(2000, 1, 2, 12, 0, tzinfo=CHICAGO), 2451546.25),
    ])
    def test_instant_mode(self, when, expected):
        """Test Julian dates including the time of day."""
        assert julian_date(when, include_time=True) == expected

    @pytest.mark.parametrize("when, expected", [
        (datetime(2000, 1, 1, 12, 0, tzinfo=LONDON), 2451544.5),
        (datetime(2000, 1, 2, 0, 0, tzinfo=LONDON), 2451545.5),
        (datetime(2000, 1, 2, 12, 0, tzinfo=LONDON), 2451545.5),
        (datetime(2000, 1, 2, 12, 0, tzinfo=CHICAGO), 2451545.5),
    ])
    def test_midnight_mode(self, when, expected):
        """Test Julian dates of the preceding UTC midnight."""
        assert julian_date(when) == expected
        assert julian_midnight_date(when) == expected

    def test_zone_resolved_to_utc_date(self):
        """Test the UTC calendar date decides the midnight, not the local one."""
        # 23:30 in Chicago on Jan 1 is already Jan 2 in UTC
        when = datetime(2000, 1, 1, 23, 30, tzinfo=CHICAGO)
        assert julian_date(when) == 2451545.5

    def test_naive_datetime_treated_as_utc(self):
        """Test naive timestamps are taken to be UTC."""
        naive = datetime(2000, 1, 1, 12, 0)
        assert julian_date(naive, include_time=True) == 2451545.0

    @pytest.mark.parametrize("when", [
        datetime(2023, 1, 1, 10, 15, 30, tzinfo=ZoneInfo("Europe/Paris")),
        datetime(1969, 7, 20, 20, 17, 40, tzinfo=timezone.utc),
        datetime(2024, 2, 29, 23, 59, 0, tzinfo=timezone.utc),
        datetime(1582, 10, 4, 6, 0, tzinfo=timezone(timedelta(hours=-5))),
    ])
    def test_midnight_bounds_instant(self, when):
        """Test midnight <= instant < midnight + 1."""
        midnight = julian_date(when)
        instant = julian_date(when, include_time=True)
        assert midnight <= instant < midnight + 1


# =============================================================================
# Century and TT helpers
# =============================================================================

class TestJulianCentury:
    """Tests for Julian century time."""

    def test_epoch_is_zero(self):
        """Test J2000.0 is century zero."""
        assert julian_century(2451545.0) == 0.0

    def test_four_years(self):
        """Test four Julian years are 0.04 centuries."""
        assert julian_century(2451545.0 + 365.25 * 4) == 0.04


class TestCurrentJulianDay:
    """Tests for whole days since J2000.0 with the TT offset."""

    def test_epoch(self):
        """Test the epoch itself gives only the TT offset."""
        when = datetime(2000, 1, 1, 12, 0, tzinfo=LONDON)
        assert current_julian_day(when) == TT_OFFSET_DAYS

    def test_truncates_partial_day(self):
        """Test a day less one second still counts as day zero."""
        when = datetime(2000, 1, 2, 11, 59, 59, tzinfo=LONDON)
        assert current_julian_day(when) == TT_OFFSET_DAYS

    def test_next_day(self):
        """Test one full day after the epoch."""
        when = datetime(2000, 1, 2, 12, 0, tzinfo=LONDON)
        assert current_julian_day(when) == pytest.approx(1.0 + TT_OFFSET_DAYS)


# =============================================================================
# Calendar helpers
# =============================================================================

class TestCalendarDate:
    """Tests for Julian date to Gregorian calendar conversion."""

    @pytest.mark.parametrize("jd, expected", [
        (2451545.0, (2000, 1, 1)),
        (2451544.5, (2000, 1, 1)),
        (2451544.4, (1999, 12, 31)),
        (2459945.5, (2023, 1, 1)),
        (0.0, (-4713, 11, 24)),
        (-5.0, (-4713, 11, 19)),
    ])
    def test_calendar_date(self, jd, expected):
        """Test known Julian date to calendar conversions."""
        assert calendar_date(jd) == expected

    @pytest.mark.parametrize("when", [
        datetime(2000, 1, 1, tzinfo=timezone.utc),
        datetime(2000, 12, 31, tzinfo=timezone.utc),
        datetime(2023, 3, 1, tzinfo=timezone.utc),
        datetime(2024, 3, 1, tzinfo=timezone.utc),
        datetime(1900, 3, 1, tzinfo=timezone.utc),
        datetime(2100, 12, 31, tzinfo=timezone.utc),
    ])
    def test_day_of_year_matches_datetime(self, when):
        """Test day_of_year agrees with the standard library."""
        assert day_of_year(julian_date(when)) == when.timetuple().tm_yday

    def test_day_of_year_before_common_era(self):
        """Test day-of-year for a negative Julian date."""
        # 19 November 4714 BC, not a leap year
        assert day_of_year(-5.0) == 323


class TestUtcMidnight:
    """Tests for the UTC midnight anchor."""

    def test_utc_midnight(self):
        """Test the UTC midnight of a zoned timestamp."""
        when = datetime(2023, 1, 1, 0, 30, tzinfo=ZoneInfo("Europe/Paris"))
        assert utc_midnight(when) == datetime(2022, 12, 31, tzinfo=timezone.utc)
