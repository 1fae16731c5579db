"""
SUNRISE Solar Ephemeris

Low-precision solar position series (Meeus, Astronomical Algorithms ch. 25,
as used by the NOAA solar calculator).

Every function takes the Julian century time T (see julian.julian_century)
and is a pure polynomial or trigonometric evaluation of it.
"""

import math
from dataclasses import dataclass

from sunrise.angles import Angle, asin, cos, sin, tan
from sunrise.constants import MINUTES_PER_DEGREE


@dataclass(frozen=True)
class SolarGeometry:
    """Declination and equation of time for one instant."""
    declination: Angle
    equation_of_time: float  # Minutes, apparent minus mean solar time


def geometric_mean_longitude(t: float) -> Angle:
    """Geometric mean longitude of the sun, in [0, 360)."""
    return Angle(280.46646 + t * (36000.76983 + t * 0.0003032)).simplify()


def geometric_mean_anomaly(t: float) -> Angle:
    return Angle(357.52911 + t * (35999.05029 - 0.0001537 * t))


def eccentricity(t: float) -> float:
    """Eccentricity of Earth's orbit (unitless)."""
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def equation_of_center(t: float) -> Angle:
    m = geometric_mean_anomaly(t)
    return Angle(
        sin(m) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + sin(2 * m) * (0.019993 - 0.000101 * t)
        + sin(3 * m) * 0.000289
    )


def true_longitude(t: float) -> Angle:
    return geometric_mean_longitude(t) + equation_of_center(t)


def _ascending_node(t: float) -> Angle:
    # Longitude of the moon's ascending node, drives nutation
    return Angle(125.04 - 1934.136 * t)


def apparent_longitude(t: float) -> Angle:
    """True longitude corrected for nutation and aberration."""
    omega = _ascending_node(t)
    return Angle(true_longitude(t).degrees - 0.00569 - 0.00478 * sin(omega))


def mean_obliquity(t: float) -> Angle:
    """Mean obliquity of the ecliptic."""
    seconds = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
    return Angle.from_degrees(23, 26, seconds)


def obliquity_correction(t: float) -> Angle:
    """Obliquity of the ecliptic corrected for nutation."""
    omega = _ascending_node(t)
    return Angle(mean_obliquity(t).degrees + 0.00256 * cos(omega))


def declination(t: float) -> Angle:
    """Declination of the sun; the NaN angle if the series leaves [-1, 1]."""
    return asin(sin(obliquity_correction(t)) * sin(apparent_longitude(t)))


def equation_of_time(t: float) -> float:
    """
    Equation of time in minutes (apparent minus mean solar time).

    Args:
        t: Julian century time

    Returns:
        Minutes; positive when the sundial runs ahead of the clock
    """
    epsilon = obliquity_correction(t)
    l0 = geometric_mean_longitude(t)
    e = eccentricity(t)
    m = geometric_mean_anomaly(t)

    y = tan(epsilon / 2) ** 2
    sin_m = sin(m)

    e_time = (
        y * sin(2 * l0)
        - 2.0 * e * sin_m
        + 4.0 * e * y * sin_m * cos(2 * l0)
        - 0.5 * y * y * sin(4 * l0)
        - 1.25 * e * e * sin(2 * m)
    )
    return math.degrees(e_time) * MINUTES_PER_DEGREE


def solar_geometry(t: float) -> SolarGeometry:
    return SolarGeometry(declination=declination(t), equation_of_time=equation_of_time(t))
