"""
SUNRISE Shared Constants

Centralizes the astronomical constants, iteration limits and default values
used across the sunrise calculation engine.

Constants are organized by category:
    - Time scales and epochs
    - Solar event geometry
    - Polar day classification
    - Solver limits
    - Moon phase reference
    - File paths and formats
"""

from datetime import datetime, timezone
from typing import Final

# =============================================================================
# Version and Identity
# =============================================================================

SUNRISE_VERSION: Final[str] = "0.1.0"

# =============================================================================
# Time Scales and Epochs
# =============================================================================

# Julian date of J2000.0 (2000-01-01T12:00:00 UTC)
J2000_JULIAN_DATE: Final[float] = 2451545.0

DAYS_PER_JULIAN_CENTURY: Final[float] = 36525.0
MINUTES_PER_DAY: Final[float] = 1440.0
SECONDS_PER_DAY: Final[float] = 86400.0

# Fixed TT - UT offset (seconds)
TT_OFFSET_SECONDS: Final[float] = 69.184
TT_OFFSET_DAYS: Final[float] = TT_OFFSET_SECONDS / SECONDS_PER_DAY

# =============================================================================
# Solar Event Geometry
# =============================================================================

# Zenith distance of the sun's centre at rise/set: 90 deg plus 50 arcmin
# for refraction and the solar semi-diameter.
SOLAR_ZENITH_DEGREES: Final[int] = 90
SOLAR_ZENITH_ARCMINUTES: Final[float] = 50.0

# Local solar noon expressed in minutes after midnight at longitude 0
SOLAR_NOON_MINUTES: Final[float] = 720.0

# Earth rotates one degree of longitude every four minutes
MINUTES_PER_DEGREE: Final[float] = 4.0

# =============================================================================
# Polar Day Classification
# =============================================================================

# Day-of-year windows that count as summer when no event is found
NORTHERN_SUMMER_START_DOY: Final[int] = 79
NORTHERN_SUMMER_END_DOY: Final[int] = 267
SOUTHERN_SUMMER_END_DOY: Final[int] = 83
SOUTHERN_SUMMER_START_DOY: Final[int] = 263

# =============================================================================
# Solver Limits
# =============================================================================

REFINEMENT_MAX_ITERATIONS: Final[int] = 4
SOLAR_NOON_MAX_ITERATIONS: Final[int] = 10
EVENT_SEARCH_MAX_DAYS: Final[int] = 400

# Successive estimates within one second count as converged
CONVERGENCE_TOLERANCE_DAYS: Final[float] = 1.0 / SECONDS_PER_DAY
CONVERGENCE_TOLERANCE_MINUTES: Final[float] = 1.0 / 60.0

# =============================================================================
# Moon Phase Reference
# =============================================================================

SYNODIC_MONTH_DAYS: Final[float] = 29.530588853
REFERENCE_NEW_MOON: Final[datetime] = datetime(2000, 1, 6, 12, 24, 1, tzinfo=timezone.utc)

# =============================================================================
# Default Site (Royal Observatory, Greenwich)
# =============================================================================

DEFAULT_SITE_LATITUDE: Final[float] = 51.4769
DEFAULT_SITE_LONGITUDE: Final[float] = 0.0
DEFAULT_SITE_TIMEZONE: Final[str] = "Europe/London"
DEFAULT_SITE_NAME: Final[str] = "Greenwich"

# =============================================================================
# File Paths and Formats
# =============================================================================

# Configuration file search paths
CONFIG_FILENAME: Final[str] = "sunrise.yaml"
CONFIG_ENV_PREFIX: Final[str] = "SUNRISE_"

# Log settings
LOG_MAX_BYTES: Final[int] = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT: Final[int] = 5
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
