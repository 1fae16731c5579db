"""
SUNRISE Moon Phase

Mean lunar phase from the time elapsed since a known new moon. Uses the
mean synodic month, so results can be off by up to about half a day from
the true phase.
"""

import math
from datetime import datetime

from sunrise.constants import REFERENCE_NEW_MOON, SYNODIC_MONTH_DAYS
from sunrise.julian import julian_date

_REFERENCE_JULIAN_DATE = julian_date(REFERENCE_NEW_MOON, include_time=True)


def moon_age_days(date_time: datetime) -> float:
    """Days since the most recent mean new moon, in [0, synodic month)."""
    elapsed = julian_date(date_time, include_time=True) - _REFERENCE_JULIAN_DATE
    return elapsed % SYNODIC_MONTH_DAYS


def moon_phase(date_time: datetime) -> float:
    """
    Fraction of the lunar cycle elapsed at date_time.

    Returns:
        Float in [0.0, 1.0): 0.0 new moon, 0.25 first quarter, 0.5 full
        moon, 0.75 last quarter
    """
    phase = moon_age_days(date_time) / SYNODIC_MONTH_DAYS
    # Tiny negative ages wrap to exactly one synodic month
    if phase >= 1.0:
        return 0.0
    return phase


def moon_illumination(date_time: datetime) -> float:
    """Illuminated fraction of the lunar disc, 0.0 (new) to 1.0 (full)."""
    return (1 - math.cos(2 * math.pi * moon_phase(date_time))) / 2
