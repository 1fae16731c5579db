"""
SUNRISE Solar Event Solvers

Hour angle, daily sunrise/sunset solver, polar-day refinement and solar
noon, plus conversion of the resulting minute offsets to civil time.

All solvers work in minutes after the UTC midnight identified by a midnight
Julian date. A NaN minute value means the sun does not cross the horizon on
that day; refined_sunrise_set_utc() resolves it by stepping to the nearest
day on which it does.
"""

import math
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple

from sunrise.angles import Angle, acos, cos, tan
from sunrise.constants import (
    CONVERGENCE_TOLERANCE_DAYS,
    CONVERGENCE_TOLERANCE_MINUTES,
    EVENT_SEARCH_MAX_DAYS,
    MINUTES_PER_DAY,
    MINUTES_PER_DEGREE,
    NORTHERN_SUMMER_END_DOY,
    NORTHERN_SUMMER_START_DOY,
    REFINEMENT_MAX_ITERATIONS,
    SOLAR_NOON_MAX_ITERATIONS,
    SOLAR_NOON_MINUTES,
    SOLAR_ZENITH_ARCMINUTES,
    SOLAR_ZENITH_DEGREES,
    SOUTHERN_SUMMER_END_DOY,
    SOUTHERN_SUMMER_START_DOY,
)
from sunrise.exceptions import EventNotFoundError
from sunrise.julian import day_of_year, julian_century, julian_date, utc_midnight
from sunrise.logging_config import get_logger
from sunrise.models import DaylightType
from sunrise.solar import equation_of_time, solar_geometry

logger = get_logger(__name__)

SOLAR_ZENITH = Angle.from_degrees(SOLAR_ZENITH_DEGREES, SOLAR_ZENITH_ARCMINUTES)


# =============================================================================
# Hour Angle and Daily Solver
# =============================================================================


def hour_angle_sunrise(latitude: Angle, declination: Angle) -> Angle:
    """
    Hour angle of the sun at sunrise.

    Args:
        latitude: Observer latitude
        declination: Solar declination

    Returns:
        Hour angle, or the NaN angle when the sun stays above or below the
        horizon all day
    """
    return acos(
        cos(SOLAR_ZENITH) / (cos(latitude) * cos(declination))
        - tan(latitude) * tan(declination)
    )


def sunrise_set_utc(rise: bool, jd: float, latitude: Angle, longitude: Angle) -> float:
    """Minutes after UTC midnight of sunrise (or sunset), NaN if none.

    Single evaluation at jd without refinement; jd may carry a fractional
    day to evaluate the ephemeris at the approximate event time.
    """
    geometry = solar_geometry(julian_century(jd))
    hour_angle = hour_angle_sunrise(latitude, geometry.declination)
    if not rise:
        hour_angle = -hour_angle
    return (
        SOLAR_NOON_MINUTES
        - MINUTES_PER_DEGREE * (longitude + hour_angle).degrees
        - geometry.equation_of_time
    )


# =============================================================================
# Refinement and Polar Classification
# =============================================================================


def classify_polar_day(jd: float, latitude: Angle) -> DaylightType:
    """Regime of a day on which the sun never crosses the horizon.

    Summer in the observer's hemisphere means midnight sun, anything else
    polar night.
    """
    doy = day_of_year(jd)
    if latitude.degrees >= 0:
        summer = NORTHERN_SUMMER_START_DOY < doy < NORTHERN_SUMMER_END_DOY
    else:
        summer = doy < SOUTHERN_SUMMER_END_DOY or doy > SOUTHERN_SUMMER_START_DOY
    return DaylightType.MIDNIGHT_SUN if summer else DaylightType.POLAR_NIGHT


def _search_step(rise: bool, daylight_type: DaylightType) -> int:
    # Midnight sun: last sunrise before, first sunset after.
    # Polar night: first sunrise after, last sunset before.
    if daylight_type is DaylightType.MIDNIGHT_SUN:
        return -1 if rise else 1
    return 1 if rise else -1


def _refine_once(rise: bool, jd: float, estimate: float, latitude: Angle, longitude: Angle) -> float:
    return sunrise_set_utc(rise, jd + estimate / MINUTES_PER_DAY, latitude, longitude)


def _find_event_day(
    rise: bool,
    jd: float,
    latitude: Angle,
    longitude: Angle,
    step: int,
    max_search_days: int,
) -> Tuple[int, float]:
    """Step whole days from jd to the first day with a finite event time.

    A day only counts when the estimate stays finite after one refinement
    pass at the estimated event time; that refined value is returned.
    """
    for days in range(1, max_search_days + 1):
        offset = step * days
        estimate = sunrise_set_utc(rise, jd + offset, latitude, longitude)
        if math.isnan(estimate):
            continue
        estimate = _refine_once(rise, jd + offset, estimate, latitude, longitude)
        if not math.isnan(estimate):
            return offset, estimate

    logger.warning(
        f"No {'sunrise' if rise else 'sunset'} within {max_search_days} days "
        f"of JD {jd} at latitude {latitude.degrees}"
    )
    raise EventNotFoundError(rise, jd, max_search_days)


def _converge(
    rise: bool,
    jd: float,
    estimate: float,
    latitude: Angle,
    longitude: Angle,
    max_iterations: int,
) -> float:
    """Re-evaluate the daily solver at the estimated event time until stable.

    Returns NaN as soon as a pass finds no horizon crossing.
    """
    for iteration in range(max_iterations):
        refined = _refine_once(rise, jd, estimate, latitude, longitude)
        if math.isnan(refined):
            logger.debug(f"Refinement left the event window at iteration {iteration}")
            return refined
        converged = abs(refined - estimate) / MINUTES_PER_DAY < CONVERGENCE_TOLERANCE_DAYS
        estimate = refined
        if converged:
            break
    return estimate


def refined_sunrise_set_utc(
    rise: bool,
    jd: float,
    latitude: Angle,
    longitude: Angle,
    max_search_days: int = EVENT_SEARCH_MAX_DAYS,
    max_iterations: int = REFINEMENT_MAX_ITERATIONS,
) -> Tuple[float, DaylightType]:
    """
    Sunrise or sunset in minutes after the UTC midnight jd, with polar handling.

    The daily solver is converged by fixed-point iteration at the estimated
    event time. A day has no event when the midnight estimate or any
    refinement pass is NaN, which includes the edge days of a polar period
    where the sun has already stopped crossing the horizon by the time of
    the event. The nearest day with an event is then found by stepping
    whole days (backwards for sunrise and forwards for sunset during
    midnight sun, the other way round during polar night) and its time
    taken from a single refinement pass, so the result can be negative or
    exceed one day.

    Whole-day steps can miss the short crossing window within a few
    hundredths of a degree of the poles, where the search ends in
    EventNotFoundError.

    Args:
        rise: True for sunrise, False for sunset
        jd: Midnight Julian date of the requested day
        latitude: Observer latitude
        longitude: Observer longitude (east positive)
        max_search_days: Maximum number of days to step away from jd
        max_iterations: Maximum fixed-point refinement passes

    Returns:
        Tuple of (minutes after the UTC midnight of jd, DaylightType)

    Raises:
        EventNotFoundError: If no event lies within max_search_days
    """
    estimate = sunrise_set_utc(rise, jd, latitude, longitude)
    if not math.isnan(estimate):
        estimate = _converge(rise, jd, estimate, latitude, longitude, max_iterations)
        if not math.isnan(estimate):
            return estimate, DaylightType.NORMAL

    daylight_type = classify_polar_day(jd, latitude)
    step = _search_step(rise, daylight_type)
    day_offset, estimate = _find_event_day(
        rise, jd, latitude, longitude, step, max_search_days
    )
    logger.debug(
        f"{daylight_type.value}: nearest {'sunrise' if rise else 'sunset'} "
        f"is {day_offset:+d} days from JD {jd}"
    )
    return day_offset * MINUTES_PER_DAY + estimate, daylight_type


# =============================================================================
# Solar Noon
# =============================================================================


def solar_noon_utc(
    jd: float,
    longitude: Angle,
    max_iterations: int = SOLAR_NOON_MAX_ITERATIONS,
) -> float:
    """
    Solar noon in minutes after the UTC midnight jd.

    Args:
        jd: Midnight Julian date of the requested day
        longitude: Observer longitude (east positive)
        max_iterations: Maximum refinement passes

    Returns:
        Minutes after UTC midnight (may be negative or exceed 1440 near the
        date line)
    """
    base = SOLAR_NOON_MINUTES - MINUTES_PER_DEGREE * longitude.degrees
    estimate = base - equation_of_time(julian_century(jd - longitude.degrees / 360.0))

    for _ in range(max_iterations):
        refined = base - equation_of_time(julian_century(jd + estimate / MINUTES_PER_DAY))
        converged = abs(refined - estimate) < CONVERGENCE_TOLERANCE_MINUTES
        estimate = refined
        if converged:
            break
    return estimate


# =============================================================================
# Civil Time Conversion
# =============================================================================


def _result_zone(date_time: datetime, zone: Optional[tzinfo]) -> tzinfo:
    # Naive input was taken as UTC, so answer in UTC
    if zone is not None:
        return zone
    return date_time.tzinfo or timezone.utc


def sunrise_set_event(
    rise: bool,
    date_time: datetime,
    latitude: Angle,
    longitude: Angle,
    zone: Optional[tzinfo] = None,
    max_search_days: int = EVENT_SEARCH_MAX_DAYS,
    max_iterations: int = REFINEMENT_MAX_ITERATIONS,
) -> Tuple[datetime, DaylightType]:
    """
    Sunrise or sunset for the UTC day containing date_time, with its regime.

    Args:
        rise: True for sunrise, False for sunset
        date_time: Any instant on the requested day
        latitude: Observer latitude
        longitude: Observer longitude (east positive)
        zone: Zone for the result; defaults to the zone of date_time
        max_search_days: Maximum number of days searched on polar dates
        max_iterations: Maximum fixed-point refinement passes

    Returns:
        Tuple of (event time truncated to whole seconds, DaylightType)

    Raises:
        EventNotFoundError: If a polar search exceeds max_search_days
    """
    minutes, daylight_type = refined_sunrise_set_utc(
        rise,
        julian_date(date_time),
        latitude,
        longitude,
        max_search_days=max_search_days,
        max_iterations=max_iterations,
    )
    event = utc_midnight(date_time) + timedelta(seconds=int(minutes * 60))
    return event.astimezone(_result_zone(date_time, zone)), daylight_type


def sunrise_set_time(
    rise: bool,
    date_time: datetime,
    latitude: Angle,
    longitude: Angle,
    zone: Optional[tzinfo] = None,
    max_search_days: int = EVENT_SEARCH_MAX_DAYS,
    max_iterations: int = REFINEMENT_MAX_ITERATIONS,
) -> datetime:
    """Sunrise or sunset for the UTC day containing date_time, as civil time."""
    event, _ = sunrise_set_event(
        rise, date_time, latitude, longitude, zone, max_search_days, max_iterations
    )
    return event


def solar_noon_time(
    date_time: datetime,
    longitude: Angle,
    zone: Optional[tzinfo] = None,
    max_iterations: int = SOLAR_NOON_MAX_ITERATIONS,
) -> datetime:
    """Solar noon for the UTC day containing date_time, to the millisecond."""
    minutes = solar_noon_utc(julian_date(date_time), longitude, max_iterations)
    noon = utc_midnight(date_time) + timedelta(milliseconds=int(minutes * 60_000))
    return noon.astimezone(_result_zone(date_time, zone))
